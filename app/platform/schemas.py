from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    status_code: int = 200
    status: str = "success"
    message: str
    data: T


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrors(BaseModel):
    errors: List[FieldError]


class ValidationErrorResponse(APIResponse[ValidationErrors]):
    status_code: int = 422
    status: str = "error"
    message: str = "Validation failed"
