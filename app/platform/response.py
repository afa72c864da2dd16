from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.platform.schemas import APIResponse


def api_response(
    *,
    data: Optional[Any] = None,
    message: str = "Operation successful",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Wrap a payload in the envelope every JSON endpoint returns:
    {status_code, status, message, data}.

    status is "success" below 400 and "error" otherwise.
    """
    envelope = APIResponse[Any](
        status_code=status_code,
        status="success" if status_code < 400 else "error",
        message=message,
        data=jsonable_encoder(data) if data is not None else {},
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump())
