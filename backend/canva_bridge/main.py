"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.sessions import SessionMiddleware
from canva_bridge.core.config import settings
from canva_bridge.core.exceptions import BridgeError
from canva_bridge.api.router import api_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Cedarville-Canva Integration server is running"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    try:
        settings.validate_required()
    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        logger.error("Set CANVA_CLIENT_ID, CANVA_CLIENT_SECRET, BASE_URL and REDIRECT_URI in the environment or .env file")
        raise
    if settings.uses_insecure_session_secret:
        logger.warning("SESSION_SECRET is not set; using an insecure development key. Do not run like this in production.")
    logger.info(f"{settings.APP_NAME} listening on port {settings.PORT}")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="OAuth bridge exposing Canva Connect designs to conversational agents",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# Session state lives in a signed cookie; nothing is kept server side
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.SESSION_COOKIE_NAME,
    max_age=settings.SESSION_MAX_AGE_SECONDS,
    same_site=settings.COOKIE_SAMESITE,
    https_only=settings.COOKIE_SECURE,
)


@app.exception_handler(BridgeError)
async def bridge_error_handler(request: Request, exc: BridgeError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(api_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return HEALTH_MESSAGE


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.APP_VERSION}


def run() -> None:
    import uvicorn
    uvicorn.run(
        "canva_bridge.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
