import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from deps import get_settings

# --------------------------------------------------
# LOGGING
# --------------------------------------------------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# --------------------------------------------------
# APP
# --------------------------------------------------
app = FastAPI(
    title="Data Enrichment API",
    version="1.0.0",
    swagger_ui_parameters={
        "displayRequestDuration": True,
    },
)


@app.on_event("startup")
def _log_startup():
    settings = get_settings()
    logger.info("Enrichment API running on port %s", settings.port)
    logger.info("Estimated margin per enrichment: $%.2f", settings.margin_per_record)
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; every enrichment will fail")


# --------------------------------------------------
# CORS
# --------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.options("/{path:path}")
def preflight(path: str, request: Request):
    return Response(status_code=204)


# --------------------------------------------------
# ROUTERS
# --------------------------------------------------
from routers.enrich import router as enrich_router
from routers.webhooks import router as webhooks_router
app.include_router(enrich_router)
app.include_router(webhooks_router)

# --------------------------------------------------
# HEALTH CHECK
# --------------------------------------------------
@app.get("/health")
def health():
    return {"status": "healthy", "service": "data-enrichment-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=get_settings().port)
