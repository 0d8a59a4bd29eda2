import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from config import get_log_level
from core.http.session import cleanup_session
from related_features.api import router as related_features_router

load_dotenv()

# Basic logging configuration
logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Roebling")

app.include_router(related_features_router)


@app.on_event("shutdown")
async def shutdown_event():
    """Clean up resources when shutting down."""
    await cleanup_session()
    logger.info("Application shutdown completed successfully")


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: HTTPException):
    """Handle 404 Not Found errors."""
    logger.warning("404 Not Found: %s. Detail: %s", request.url, exc.detail)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Endpoint not found", "detail": exc.detail},
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=port,
        log_level="info",
    )
