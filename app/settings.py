# GPL-3.0-only
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL_URL = (
    "https://api-inference.huggingface.co/models/facebook/bart-large-cnn"
)


@dataclass
class Settings:
    huggingface_api_key: Optional[str] = None
    model_url: str = DEFAULT_MODEL_URL
    # None keeps the httpx transport default
    timeout_seconds: Optional[float] = None

    def load(self, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        self.huggingface_api_key = env.get("HUGGINGFACE_API_KEY")
        self.model_url = env.get("SUMMARIZER_MODEL_URL") or DEFAULT_MODEL_URL
        timeout = env.get("SUMMARIZER_TIMEOUT_SECONDS")
        self.timeout_seconds = float(timeout) if timeout else None
        return self

    def to_dict(self):
        return dict(
            huggingface_api_key="***" if self.huggingface_api_key else None,
            model_url=self.model_url,
            timeout_seconds=self.timeout_seconds,
        )

settings_cache = Settings()
