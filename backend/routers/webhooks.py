# routers/webhooks.py

import logging

from fastapi import APIRouter, Request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/webhook", tags=["webhooks"])


@router.post("/stripe")
async def stripe_webhook(request: Request):
    # TODO: verify stripe-signature against the endpoint secret and grant access on payment
    payload = await request.body()
    signature = request.headers.get("stripe-signature")
    logger.info(
        "WEBHOOK: stripe bytes=%s signed=%s",
        len(payload),
        signature is not None,
    )
    return {"received": True}
