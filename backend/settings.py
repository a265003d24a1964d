import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    anthropic_api_key: str | None = None
    anthropic_model: str = DEFAULT_MODEL
    max_tokens: int = 1024

    # demo values, not real pricing
    max_batch_size: int = 50
    cost_per_record: float = 0.15
    retail_price_per_record: float = 10

    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            anthropic_model=os.getenv("ANTHROPIC_MODEL", DEFAULT_MODEL),
            max_tokens=int(os.getenv("ENRICH_MAX_TOKENS", "1024")),
            max_batch_size=int(os.getenv("ENRICH_MAX_BATCH_SIZE", "50")),
            cost_per_record=float(os.getenv("ENRICH_COST_PER_RECORD", "0.15")),
            retail_price_per_record=float(os.getenv("ENRICH_RETAIL_PRICE_PER_RECORD", "10")),
            port=int(os.getenv("PORT", "3000")),
        )

    @property
    def margin_per_record(self) -> float:
        return self.retail_price_per_record - self.cost_per_record
