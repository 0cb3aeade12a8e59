from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import calculator
from .core.config import settings
import logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Calculator API")


@app.on_event("startup")
async def startup_event():
    logger.info("Application starting up...")
    logger.info(
        f"History file: {settings.history_file} "
        f"(key: {settings.history_key}, limit: {settings.history_limit})"
    )


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router, prefix="/api")
