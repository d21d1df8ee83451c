"""
Gateway error taxonomy.

Every request-scoped failure is raised as a GatewayException and rendered
as a plain-text body by gateway_exception_handler.
"""
from fastapi import HTTPException, Request, status
from fastapi.responses import PlainTextResponse


class GatewayException(HTTPException):
    """Base class for errors reported to the caller as plain text."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class ArtistIdRequiredException(GatewayException):
    def __init__(self, detail: str = "artistID is required"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail)


class UpstreamException(GatewayException):
    """The Spotify lookup failed."""

    def __init__(self, reason: str):
        super().__init__(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"could not get artist data: {reason}",
        )


class EncodingException(GatewayException):
    """The response projection could not be serialized."""

    def __init__(self, reason: str):
        super().__init__(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"could not encode response: {reason}",
        )


async def gateway_exception_handler(request: Request, exc: GatewayException) -> PlainTextResponse:
    return PlainTextResponse(
        f"{exc.detail}\n",
        status_code=exc.status_code,
        headers={"X-Content-Type-Options": "nosniff"},
    )
