# portfolio/api/response.py
"""
JSON envelope used by every API response:

    {"status": bool, "message": str, "data": ..., "errors": ...}

``data`` and ``errors`` are omitted when empty.
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(status: bool, message: str, data: Any = None, errors: Any = None) -> dict:
    body = {"status": status, "message": message}
    if data is not None:
        body["data"] = jsonable_encoder(data)
    if errors is not None:
        body["errors"] = jsonable_encoder(errors)
    return body


def success_response(message: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(True, message, data=data))


def error_response(
    status_code: int,
    message: str,
    errors: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(False, message, errors=errors), headers=headers)
