from api.text.schemas import TextRequest, TextResponse
from openai_gateway import TextCompletionGateway


def text_completion(request: TextRequest, gateway: TextCompletionGateway) -> TextResponse:
    return TextResponse(response=gateway.complete(request.prompt))
