from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ApiError(Exception):
    status_code = 500
    code = "InternalError"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidContentError(ApiError):
    status_code = 400
    code = "InvalidContent"


class ResourceNotFoundError(ApiError):
    status_code = 404
    code = "ResourceNotFound"


class InternalError(ApiError):
    status_code = 500
    code = "InternalError"


def error_response(err: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=err.status_code,
        content={"code": err.code, "message": err.message},
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only the first problem is reported, e.g. "body.username: Field required"
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        message = f"{loc}: {first.get('msg', 'invalid')}" if loc else first.get("msg", "invalid")
    else:
        message = "Invalid content"
    return error_response(InvalidContentError(message))
