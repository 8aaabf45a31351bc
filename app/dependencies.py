# GPL-3.0-only
from fastapi import Depends
from app.services.summarizer import HuggingFaceSummarizer
from app.settings import Settings, settings_cache

def get_settings() -> Settings:
    return settings_cache

def get_summarizer(settings: Settings = Depends(get_settings)):
    return HuggingFaceSummarizer(settings)
