from api.image.schemas import ImageRequest, ImageResponse
from openai_gateway import ImageGenerationGateway


def generate_image(request: ImageRequest, gateway: ImageGenerationGateway) -> ImageResponse:
    return ImageResponse(image_url=gateway.generate(request.prompt))
