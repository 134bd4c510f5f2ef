from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    prompt: str = Field(..., description="Prompt to send to the chat completion model")


class TextResponse(BaseModel):
    response: str = Field(..., description="Raw chat completion body returned by the provider")
