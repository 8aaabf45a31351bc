# app/routers/summarize.py

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_summarizer
from app.exceptions import UpstreamTransportError
from app.schemas import SummarizeRequest, SummarizeResponse, SummaryOk
from app.services.summarizer import to_legacy_response


router = APIRouter()


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(body: SummarizeRequest, summarizer=Depends(get_summarizer)):
    # transport failures are left unhandled here; old clients expect a bare 500
    result = await summarizer.summarize(body.text)
    payload, status_code = to_legacy_response(result)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@router.post("/v2/summarize")
async def summarize_v2(body: SummarizeRequest, summarizer=Depends(get_summarizer)):
    try:
        result = await summarizer.summarize(body.text)
    except (httpx.HTTPError, ValueError) as exc:
        raise UpstreamTransportError(str(exc) or exc.__class__.__name__) from exc
    status_code = 200 if isinstance(result, SummaryOk) else 502
    return JSONResponse(status_code=status_code, content=result.model_dump())
