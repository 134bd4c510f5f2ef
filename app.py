import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.image.router import router as image_router
from api.text.router import router as text_router
from errors import GatewayErrorKind

logger = logging.getLogger(__name__)


app = FastAPI(title="Prompt Gateway", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[],              # keep empty when using regex
    allow_origin_regex=".*",       # matches any origin
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _is_missing_prompt(exc: RequestValidationError) -> bool:
    for error in exc.errors():
        if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body", "prompt"):
            return True
    return False


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "Prompt not found in request body" if _is_missing_prompt(exc) else "Bad request"
    logger.info(
        "Rejected %s %s kind=%s: %s",
        request.method,
        request.url.path,
        GatewayErrorKind.MALFORMED_REQUEST.value,
        message,
    )
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(text_router)
app.include_router(image_router)
