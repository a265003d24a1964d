from functools import lru_cache

from fastapi import Depends

from settings import Settings
from services.enrichment_client import EnrichmentClient


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def _client_for(settings: Settings) -> EnrichmentClient:
    return EnrichmentClient(settings)


def get_enrichment_client(settings: Settings = Depends(get_settings)) -> EnrichmentClient:
    return _client_for(settings)
