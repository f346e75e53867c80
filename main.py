"""
OpenAI Chat Relay - FastAPI application relaying browser chat requests to the OpenAI completion API.
Keeps the API key server-side and answers cross-origin requests.
"""
from fastapi import FastAPI
from contextlib import asynccontextmanager
from config import Config
from routes import chat
from cors import CORSHeadersMiddleware
from utils.http_client import HTTPClientManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(CORSHeadersMiddleware)

#root endpoint
@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": "OpenAI Chat Relay is running"}

app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
