import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from navigator.completion import CompletionClient
from navigator.config import Settings
from navigator.errors import AssistantUnavailableError
from navigator.orchestrator import get_ai_chat_response
from navigator.schemas import MAX_QUERY_LENGTH, ChatResponse, UserLocation

settings = Settings.from_env()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.completion_client = await CompletionClient(settings).start()
    logger.info("Nizhal Navigator service started")
    yield
    await app.state.completion_client.close()
    logger.info("Nizhal Navigator service shutting down")


app = FastAPI(title="Nizhal Navigator", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info("%s %s completed %d in %.2fms", request.method, request.url.path, response.status_code, duration_ms)
    return response


@app.get("/health")
async def health():
    return {"status": "ok"}


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, max_length=MAX_QUERY_LENGTH)
    user_location: Optional[UserLocation] = Field(None, alias="userLocation")


@app.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(req: ChatRequest, request: Request):
    client = request.app.state.completion_client
    logger.info("Chat request received (location=%s)", "yes" if req.user_location else "no")
    try:
        return await get_ai_chat_response(
            req.query,
            req.user_location,
            client=client,
            timeout=settings.request_timeout,
        )
    except AssistantUnavailableError as e:
        return JSONResponse(status_code=503, content={"error": str(e)})
