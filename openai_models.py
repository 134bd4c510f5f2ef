from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionPayload(BaseModel):
    model: str
    messages: list[ChatMessage]


class ImageGenerationPayload(BaseModel):
    prompt: str
    n: int = 1
    size: str = "1024x1024"


class GeneratedImage(BaseModel):
    url: str | None = None


class ImageGenerationResult(BaseModel):
    data: list[GeneratedImage] | None = None
