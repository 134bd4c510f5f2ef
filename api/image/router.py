import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_http_transport
from api.image.schemas import ImageRequest, ImageResponse
from errors import GatewayError
from openai_gateway import GatewaySettings, ImageGenerationGateway
from .service import generate_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/image", response_model=ImageResponse)
def image(
    request: ImageRequest,
    transport: httpx.BaseTransport | None = Depends(get_http_transport),
) -> ImageResponse:
    try:
        gateway = ImageGenerationGateway(GatewaySettings.from_env(), transport=transport)
        return generate_image(request, gateway)
    except GatewayError as exc:
        logger.error("Image generation failed kind=%s: %s", exc.kind.value, exc)
        raise HTTPException(status_code=500, detail=f"Error generating image: {exc}") from exc
    except Exception as exc:
        logger.exception("Image generation failed unexpectedly")
        raise HTTPException(status_code=500, detail="Error generating image") from exc
