# app/exceptions.py - Exception handlers for the summarize routes

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger


class UpstreamTransportError(Exception):
    """The upstream call failed before a usable JSON body came back."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SummarizerExceptionHandler:
    """Centralized upstream exception handling."""
    @staticmethod
    async def upstream_transport_handler(
        request: Request,
        exc: UpstreamTransportError,
    ) -> JSONResponse:
        """Render transport failures as a tagged error result."""
        logger.error(
            "Upstream request failed for {}: {}", request.url.path, exc.message
        )
        return JSONResponse(
            status_code=502,
            content={
                "kind": "error",
                "message": "Summarization service request failed",
            },
        )
