# app/services/summarizer.py

from __future__ import annotations
from typing import Any, Optional, Tuple

import httpx
from loguru import logger

from app.schemas import SummarizeResponse, SummaryError, SummaryOk, SummaryResult
from app.settings import Settings


API_ERROR_PREFIX = "API Error: "
NO_SUMMARY = "No summary returned."


def interpret_upstream(payload: Any) -> SummaryResult:
    """Map the inference API's JSON body onto a tagged result.

    The API answers either ``[{"summary_text": ...}, ...]`` or
    ``{"error": ...}``. Anything else counts as an empty result.
    """
    if isinstance(payload, dict) and payload.get("error"):
        return SummaryError(message=str(payload["error"]))
    first = payload[0] if isinstance(payload, list) and payload else None
    summary = first.get("summary_text") if isinstance(first, dict) else None
    if not summary:
        return SummaryOk(summary=NO_SUMMARY)
    return SummaryOk(summary=str(summary))


def to_legacy_response(result: SummaryResult) -> Tuple[SummarizeResponse, int]:
    """Fold a tagged result into the ``{summary}`` shape older clients read.

    Upstream errors travel inside ``summary`` with the ``API Error: `` prefix
    and a 500 status.
    """
    if isinstance(result, SummaryError):
        return SummarizeResponse(summary=API_ERROR_PREFIX + result.message), 500
    return SummarizeResponse(summary=result.summary), 200


class HuggingFaceSummarizer:
    """One outbound call per ``summarize``; no retry, no caching."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.transport = transport

    def _headers(self) -> dict:
        token = self.settings.huggingface_api_key
        return {
            "Authorization": "Bearer %s" % token if token else "Bearer",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        kw: dict = {"transport": self.transport}
        if self.settings.timeout_seconds is not None:
            kw["timeout"] = self.settings.timeout_seconds
        return httpx.AsyncClient(**kw)

    async def summarize(self, text: str) -> SummaryResult:
        # transport and decode errors propagate to the caller
        async with self._client() as client:
            response = await client.post(
                self.settings.model_url,
                headers=self._headers(),
                json={"inputs": text},
            )
        payload = response.json()
        result = interpret_upstream(payload)
        if isinstance(result, SummaryError):
            logger.warning(
                "Upstream reported an error (status {}): {}",
                response.status_code,
                result.message,
            )
        else:
            logger.debug("Upstream summary received ({} chars)", len(result.summary))
        return result
