import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_http_transport
from api.text.schemas import TextRequest, TextResponse
from errors import GatewayError
from openai_gateway import GatewaySettings, TextCompletionGateway
from .service import text_completion

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/text", response_model=TextResponse)
def text(
    request: TextRequest,
    transport: httpx.BaseTransport | None = Depends(get_http_transport),
) -> TextResponse:
    try:
        gateway = TextCompletionGateway(GatewaySettings.from_env(), transport=transport)
        return text_completion(request, gateway)
    except GatewayError as exc:
        logger.error("Text completion failed kind=%s: %s", exc.kind.value, exc)
        raise HTTPException(status_code=500, detail="Error getting text completion") from exc
    except Exception as exc:
        logger.exception("Text completion failed unexpectedly")
        raise HTTPException(status_code=500, detail="Error getting text completion") from exc
