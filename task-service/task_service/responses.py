from typing import Any, List, Optional
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from task_service.models import ErrorBody, ErrorResponse, SuccessResponse


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    body = SuccessResponse(data=jsonable_encoder(data))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def error_response(
    status_code: int, message: str, code: str, details: Optional[List[dict]] = None
) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
