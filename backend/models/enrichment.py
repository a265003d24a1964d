# models/enrichment.py

from pydantic import BaseModel, Field


class Company(BaseModel):
    name: str
    original_row: dict[str, str] = Field(default_factory=dict)


class EnrichmentSummary(BaseModel):
    total_processed: int
    estimated_cost: float
    retail_value: float
    margin: float
