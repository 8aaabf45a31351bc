# tests/conftest.py

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.dependencies import get_summarizer
from app.schemas import SummaryOk


class FakeSummarizer:
    """Stands in for the upstream wrapper; records every call."""

    def __init__(self):
        self.result = SummaryOk(summary="A short summary.")
        self.error = None
        self.calls = []

    async def summarize(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_summarizer():
    return FakeSummarizer()


@pytest_asyncio.fixture(scope="function")
async def client(fake_summarizer):
    """Provide an AsyncClient with the upstream replaced by a fake."""
    app.dependency_overrides[get_summarizer] = lambda: fake_summarizer
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
