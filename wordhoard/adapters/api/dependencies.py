# wordhoard\adapters\api\dependencies.py
from __future__ import annotations

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request

from wordhoard.core.domain.elements import Caller
from wordhoard.services.lexicon_service import LexiconService
from wordhoard.services.lexicon_store import LexiconStore
from wordhoard.shared.config import settings
from wordhoard.shared.container import Container


@inject
def get_lexicon_service(
    service: LexiconService = Depends(Provide[Container.lexicon_service]),
) -> LexiconService:
    """Dependency to inject the operation boundary (container-managed)."""
    return service


@inject
def get_lexicon_store(
    store: LexiconStore = Depends(Provide[Container.lexicon_store]),
) -> LexiconStore:
    return store


def get_caller(request: Request) -> Caller:
    """
    Builds the Caller from the identity header set by the upstream auth proxy.
    A missing or blank header means an anonymous caller.
    """
    identity: Optional[str] = request.headers.get(settings.AUTH_USER_HEADER)
    identity = identity.strip() if identity else None
    if not identity:
        return Caller.anonymous()
    return Caller(authenticated=True, identity=identity)
