"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from app.adapters.inbound.http.routes import register_exception_handlers, router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="FORM Creative Studio API",
    description="Chat assistant and lead capture endpoints for the FORM Creative studio site",
    version="0.1.0",
)

app.include_router(router)
register_exception_handlers(app)
