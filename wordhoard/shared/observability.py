# wordhoard\shared\observability.py
import structlog
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from wordhoard import __version__
from wordhoard.shared.config import settings

logger = structlog.get_logger()


def setup_telemetry(app_name: str = settings.OTEL_SERVICE_NAME) -> None:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup. Without an exporter endpoint the
    global no-op provider stays in place and spans cost nothing.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return

    resource = Resource.create(attributes={
        "service.name": app_name,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces"))
    )
    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    logger.info("telemetry_enabled", service=app_name)


def instrument_fastapi(app: FastAPI) -> None:
    """Auto-instruments FastAPI so every HTTP request opens a span."""
    FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("use_case.add_word"):
            ...
    """
    return trace.get_tracer(name)
