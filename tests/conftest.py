"""Pytest configuration and fixtures."""
from typing import Any

import pytest
from fastapi.testclient import TestClient

from deps import get_enrichment_client, get_settings
from main import app
from settings import Settings


class FakeEnrichmentClient:
    """Stands in for EnrichmentClient; answers from a name -> result map."""

    def __init__(self, responses: dict[str, Any] | None = None, default: Any = None):
        self.responses = responses or {}
        self.default = default
        self.calls: list[str] = []

    async def enrich(self, company_name: str) -> dict[str, Any]:
        self.calls.append(company_name)
        result = self.responses.get(company_name, self.default)
        if isinstance(result, Exception):
            raise result
        if result is None:
            return {"industry": "Software", "headquarters": f"{company_name} HQ"}
        return dict(result)


@pytest.fixture
def settings() -> Settings:
    return Settings(anthropic_api_key="test-key")


@pytest.fixture
def fake_client() -> FakeEnrichmentClient:
    return FakeEnrichmentClient()


@pytest.fixture
def sample_enriched() -> dict[str, Any]:
    return {
        "industry": "Tech",
        "employee_range": "50-200",
        "revenue_range": "$10M-$50M",
        "headquarters": "Austin, USA",
        "founded_year": "2012",
        "tech_stack": ["Python", "AWS"],
        "pain_points": ["hiring"],
        "decision_maker": "CTO",
        "linkedin_url": "https://www.linkedin.com/company/acme",
        "ideal_pitch": "Ship faster.",
        "buying_signals": ["new funding"],
    }


@pytest.fixture
def api(settings, fake_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_enrichment_client] = lambda: fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()
