# app/client/form.py

from __future__ import annotations
import asyncio
from enum import Enum
from typing import Awaitable, Callable, Optional

import httpx
from loguru import logger


NO_SUMMARY = "No summary returned."
GENERIC_ERROR = "An error occurred while summarizing. Please try again."
TIP_THRESHOLD = 200
OPTIMAL_LENGTH_THRESHOLD = 1000
COPIED_RESET_SECONDS = 2.0

Clipboard = Callable[[str], Awaitable[None]]


class FormState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SUBMITTING = "submitting"
    RESULT = "result"


class SummaryForm:
    """Client side of the summarize round trip.

    Holds the transient UI state of one session: the text being edited, the
    in-flight flag, the displayed summary and the "copied" indicator. The
    caller owns ``http``, which must be able to reach the proxy endpoint.

    At most one submission runs at a time: ``submit`` returns ``False``
    without touching the network while a request is pending or the text is
    blank.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        endpoint: str = "/api/summarize",
        clipboard: Optional[Clipboard] = None,
        copied_reset_seconds: float = COPIED_RESET_SECONDS,
    ):
        self.http = http
        self.endpoint = endpoint
        self.clipboard = clipboard
        self.copied_reset_seconds = copied_reset_seconds
        self.text = ""
        self.summary = ""
        self.loading = False
        self.copied = False
        self.state = FormState.IDLE
        self._copied_reset: Optional[asyncio.Task] = None

    @property
    def character_count(self) -> int:
        return len(self.text)

    @property
    def show_tip(self) -> bool:
        return self.character_count > TIP_THRESHOLD

    @property
    def is_optimal_length(self) -> bool:
        return self.character_count > OPTIMAL_LENGTH_THRESHOLD

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.text.strip())

    def set_text(self, text: str) -> None:
        self.text = text
        if self.state is FormState.SUBMITTING:
            return
        self.state = FormState.EDITING if text.strip() else FormState.IDLE

    async def submit(self) -> bool:
        if not self.can_submit:
            return False
        self.loading = True
        self.state = FormState.SUBMITTING
        self.summary = ""
        try:
            response = await self.http.post(self.endpoint, json={"text": self.text})
            data = response.json()
            summary = data.get("summary") if isinstance(data, dict) else None
            # in-band "API Error: ..." strings are shown like any summary
            self.summary = str(summary) if summary else NO_SUMMARY
        except Exception:
            logger.exception("Error summarizing text")
            self.summary = GENERIC_ERROR
        finally:
            self.loading = False
            self.state = FormState.RESULT
        return True

    def clear(self) -> None:
        self.text = ""
        self.summary = ""
        self._cancel_copied_reset()
        self.copied = False
        self.state = FormState.IDLE

    async def copy_to_clipboard(self) -> bool:
        if self.clipboard is None or not self.summary:
            return False
        try:
            await self.clipboard(self.summary)
        except Exception as exc:
            logger.error("Failed to copy text: {}", exc)
            return False
        self.copied = True
        self._cancel_copied_reset()
        self._copied_reset = asyncio.create_task(self._reset_copied())
        return True

    def _cancel_copied_reset(self) -> None:
        if self._copied_reset is not None:
            self._copied_reset.cancel()
            self._copied_reset = None

    async def _reset_copied(self) -> None:
        await asyncio.sleep(self.copied_reset_seconds)
        self.copied = False
