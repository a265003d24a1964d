import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable

from models.enrichment import Company, EnrichmentSummary
from settings import Settings
from services.cost_model import estimate_cost
from services.enrichment_client import EnrichmentClient
from services.errors import EnrichmentError

logger = logging.getLogger(__name__)

ENRICHMENT_FAILED = "Enrichment failed"


@dataclass
class EnrichmentOutcome:
    company: Company
    enriched: dict[str, Any] | None = None
    error: EnrichmentError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _iso_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def enrich_companies(
    companies: Iterable[Company],
    client: EnrichmentClient,
    settings: Settings,
) -> list[EnrichmentOutcome]:
    batch = list(companies)[: settings.max_batch_size]

    outcomes: list[EnrichmentOutcome] = []
    for company in batch:
        try:
            enriched = await client.enrich(company.name)
        except EnrichmentError as exc:
            logger.warning("Error enriching %s: %s", company.name, exc)
            outcomes.append(EnrichmentOutcome(company=company, error=exc))
            continue
        outcomes.append(EnrichmentOutcome(company=company, enriched=enriched))
    return outcomes


def build_result_row(
    outcome: EnrichmentOutcome,
    settings: Settings,
    now: datetime | None = None,
) -> dict[str, Any]:
    row: dict[str, Any] = dict(outcome.company.original_row)
    if not outcome.ok:
        row["error"] = ENRICHMENT_FAILED
        return row

    row.update(outcome.enriched or {})
    row["enrichment_cost"] = estimate_cost(outcome.enriched, settings)
    row["enriched_at"] = _iso_timestamp(now)
    return row


def summarize(count: int, settings: Settings) -> EnrichmentSummary:
    estimated_cost = count * settings.cost_per_record
    retail_value = count * settings.retail_price_per_record
    return EnrichmentSummary(
        total_processed=count,
        estimated_cost=estimated_cost,
        retail_value=retail_value,
        margin=retail_value - estimated_cost,
    )


async def run_batch(
    companies: Iterable[Company],
    client: EnrichmentClient,
    settings: Settings,
) -> tuple[list[dict[str, Any]], EnrichmentSummary]:
    outcomes = await enrich_companies(companies, client, settings)
    rows = [build_result_row(o, settings) for o in outcomes]
    summary = summarize(len(rows), settings)

    failed = sum(1 for o in outcomes if not o.ok)
    logger.info("BATCH: processed=%s failed=%s", len(rows), failed)
    return rows, summary
