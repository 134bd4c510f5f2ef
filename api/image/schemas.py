from pydantic import BaseModel, Field


class ImageRequest(BaseModel):
    prompt: str = Field(..., description="Prompt describing the image to generate")


class ImageResponse(BaseModel):
    image_url: str
