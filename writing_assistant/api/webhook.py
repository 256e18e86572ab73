"""Stream Chat webhook ingress.

Stream posts channel events (``message.new``, ``ai_indicator.stop``, ...)
here. Each signed event is republished on the registry's event bus after
the response has been sent, so slow agents never delay the webhook.
"""

import json
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException, Request, status

from writing_assistant.agent.registry import AgentRegistry
from writing_assistant.api.dependencies import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])


@router.post("/webhook")
async def receive_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    registry: AgentRegistry = Depends(get_registry),
    x_signature: str | None = Header(None),
) -> dict[str, str]:
    """Verify and dispatch one Stream Chat webhook event.

    Raises:
        401: Missing or invalid ``X-Signature``.
        400: Body is not a JSON object.
    """
    body = await request.body()
    if not x_signature or not registry.chat_client.verify_webhook(body, x_signature):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook signature",
        )

    try:
        event = json.loads(body)
    except json.JSONDecodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Webhook body must be JSON",
        ) from e
    if not isinstance(event, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Webhook body must be a JSON object",
        )

    logger.debug(f"Webhook event {event.get('type')} for {event.get('cid')}")
    background_tasks.add_task(registry.events.publish, event)
    return {"status": "ok"}
