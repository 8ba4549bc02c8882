from typing import Any, List, Optional
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True
    data: Any = None


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[List[dict]] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody
