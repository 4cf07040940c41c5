# wordhoard\adapters\api\responses.py
from fastapi import status
from fastapi.responses import JSONResponse

from wordhoard.core.domain.results import OperationResult

# Maps an OperationResult code to its HTTP status.
STATUS_BY_CODE = {
    "ok": status.HTTP_200_OK,
    "duplicate_word": status.HTTP_409_CONFLICT,
    "duplicate_reference": status.HTTP_409_CONFLICT,
    "word_not_found": status.HTTP_404_NOT_FOUND,
    "element_not_found": status.HTTP_404_NOT_FOUND,
    "unauthorized": status.HTTP_401_UNAUTHORIZED,
    "invalid_element_type": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "validation_failed": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "index_out_of_range": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "word_text_changed": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "storage_fault": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_response(result: OperationResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    code = success_status if result.ok else STATUS_BY_CODE.get(result.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(
        status_code=code,
        content=result.model_dump(mode="json", by_alias=True, exclude_none=True),
    )
