import logging
import os
from dataclasses import dataclass

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from errors import GatewayError, GatewayErrorKind
from openai_models import (
    ChatCompletionPayload,
    ChatMessage,
    ImageGenerationPayload,
    ImageGenerationResult,
)

logger = logging.getLogger(__name__)


OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_CHAT_MODEL = "gpt-4-turbo-preview"
DEFAULT_IMAGE_SIZE = "1024x1024"


def get_api_key() -> str:
    load_dotenv()
    api_key = os.getenv("OPENAI_KEY")
    if not api_key:
        raise GatewayError(
            GatewayErrorKind.MISSING_CREDENTIAL,
            "OPENAI_KEY not found in environment variables",
        )
    return api_key


def _timeout_from_env() -> float | None:
    raw = (os.getenv("OPENAI_TIMEOUT_SECONDS") or "").strip()
    return float(raw) if raw else None


@dataclass(frozen=True)
class GatewaySettings:
    api_key: str
    base_url: str = OPENAI_BASE_URL
    chat_model: str = DEFAULT_CHAT_MODEL
    image_size: str = DEFAULT_IMAGE_SIZE
    timeout_seconds: float | None = None

    def __repr__(self) -> str:
        return (
            f"GatewaySettings(base_url={self.base_url!r}, chat_model={self.chat_model!r}, "
            f"image_size={self.image_size!r}, timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        api_key = get_api_key()
        return cls(
            api_key=api_key,
            base_url=(os.getenv("OPENAI_BASE_URL") or OPENAI_BASE_URL).rstrip("/"),
            chat_model=os.getenv("OPENAI_CHAT_MODEL") or DEFAULT_CHAT_MODEL,
            image_size=os.getenv("OPENAI_IMAGE_SIZE") or DEFAULT_IMAGE_SIZE,
            timeout_seconds=_timeout_from_env(),
        )


class OpenAIGateway:
    """Sends one JSON POST to the provider and checks the status.

    The transport is only swapped out in tests; ``None`` means the default
    network transport.
    """

    path = ""

    def __init__(
        self,
        settings: GatewaySettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.settings.base_url}{self.path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.api_key}",
        }

    @staticmethod
    def _encode(payload: BaseModel) -> bytes:
        try:
            return payload.model_dump_json().encode("utf-8")
        except ValueError as exc:
            raise GatewayError(GatewayErrorKind.ENCODING, f"Could not encode request: {exc}") from exc

    def post(self, payload: BaseModel) -> httpx.Response:
        body = self._encode(payload)
        try:
            with httpx.Client(timeout=self.settings.timeout_seconds, transport=self._transport) as client:
                resp = client.post(self.url, content=body, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error("Upstream request to %s failed: %s", self.url, exc)
            raise GatewayError(GatewayErrorKind.TRANSPORT, f"Upstream request failed: {exc}") from exc

        logger.info("Upstream HTTP %s returned status=%d", self.url, resp.status_code)
        if resp.status_code != httpx.codes.OK:
            logger.error("Upstream error response: %s", resp.text[:1000])
            raise GatewayError(
                GatewayErrorKind.UPSTREAM,
                f"non-OK status code received: {resp.status_code} {resp.reason_phrase}".rstrip(),
            )
        return resp


class TextCompletionGateway(OpenAIGateway):
    path = "/chat/completions"

    def complete(self, prompt: str) -> str:
        payload = ChatCompletionPayload(
            model=self.settings.chat_model,
            messages=[ChatMessage(role="user", content=prompt)],
        )
        logger.info("Calling chat completion model=%s prompt_len=%d", payload.model, len(prompt))
        resp = self.post(payload)
        text = resp.text
        logger.info("Chat completion received model=%s resp_len=%d", payload.model, len(text))
        return text


class ImageGenerationGateway(OpenAIGateway):
    path = "/images/generations"

    def generate(self, prompt: str) -> str:
        payload = ImageGenerationPayload(prompt=prompt, n=1, size=self.settings.image_size)
        logger.info("Calling image generation size=%s prompt_len=%d", payload.size, len(prompt))
        resp = self.post(payload)

        try:
            result = ImageGenerationResult.model_validate_json(resp.content)
        except ValidationError as exc:
            raise GatewayError(GatewayErrorKind.DECODING, f"Could not decode image response: {exc}") from exc

        if not result.data or not result.data[0].url:
            raise GatewayError(GatewayErrorKind.MISSING_RESULT, "image URL not found in response")

        logger.info("Image generation returned images_count=%d", len(result.data))
        return result.data[0].url
