# routers/enrich.py

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from deps import get_enrichment_client, get_settings
from settings import Settings
from services.batch_orchestrator import run_batch
from services.enrichment_client import EnrichmentClient
from services.row_extractor import extract_companies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["enrich"])


@router.post("/enrich")
async def enrich_upload(
    file: UploadFile | None = File(None),
    client: EnrichmentClient = Depends(get_enrichment_client),
    settings: Settings = Depends(get_settings),
):
    try:
        if file is None:
            raise ValueError("No file uploaded.")

        contents = await file.read()
        companies = extract_companies(contents, file.filename)
        logger.info(
            "UPLOAD: file=%s companies=%s",
            file.filename,
            len(companies),
        )

        rows, summary = await run_batch(companies, client, settings)
    except Exception:
        logger.exception("Enrichment error")
        return JSONResponse(status_code=500, content={"error": "Processing failed"})

    return {
        "success": True,
        **summary.model_dump(),
        "data": rows,
    }
