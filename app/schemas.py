# app/schemas.py

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union


# ----- Legacy wire shape -----
class SummarizeRequest(BaseModel):
    # passed through to the upstream untouched, no length checks
    text: str


class SummarizeResponse(BaseModel):
    summary: str


# ----- Tagged result -----
class SummaryOk(BaseModel):
    kind: Literal["ok"] = "ok"
    summary: str


class SummaryError(BaseModel):
    kind: Literal["error"] = "error"
    message: str


SummaryResult = Annotated[
    Union[SummaryOk, SummaryError],
    Field(discriminator="kind"),
]
