# main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from config import ProviderConfig
from models import EmailRequest
from services.draft import EmailGeneratorService
from services.llm import GeminiClient, GenerationError

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate email reply."


def create_app(
    config: Optional[ProviderConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the API. Config is read from the environment at startup unless given."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        provider_config = config or ProviderConfig.from_env()
        owned = http_client is None
        client = http_client or httpx.AsyncClient(timeout=provider_config.timeout)
        app.state.generator = EmailGeneratorService(GeminiClient(provider_config, client))
        logger.info("Email writer ready, provider %s", provider_config.api_url)
        try:
            yield
        finally:
            if owned:
                await client.aclose()
                logger.info("Shared HTTP client closed.")

    app = FastAPI(title="Email Writer Backend", lifespan=lifespan)

    # ------------- CORS -------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # --------------------------------

    @app.exception_handler(GenerationError)
    async def generation_failed(request: Request, exc: GenerationError):
        logger.error("Reply generation failed: %s", exc)
        return JSONResponse({"error": GENERATION_FAILED}, status_code=502)

    def get_generator(request: Request) -> EmailGeneratorService:
        return request.app.state.generator

    @app.post("/api/email/generate", response_class=PlainTextResponse)
    async def generate_email(
        email_request: EmailRequest,
        generator: EmailGeneratorService = Depends(get_generator),
    ):
        text = await generator.generate_reply(email_request)
        return PlainTextResponse(text)

    @app.get("/")
    def root():
        return {"status": "running", "app": "Email Writer Backend"}

    return app


app = create_app()
