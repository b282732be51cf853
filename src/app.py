"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging_config import setup_logging
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
    REQUIRE_AUTH,
)
from api.routes import postagem, tema, usuario

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Blog Pessoal API",
    description="Backend API for a personal blog: posts, topics and users.",
    version="1.0.0",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials="*" not in CORS_ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(postagem.router)
app.include_router(tema.router)
app.include_router(usuario.router)

logger.info("Basic authentication %s", "enabled" if REQUIRE_AUTH else "disabled")


@app.get("/", summary="Raiz da API", tags=["Info"])
def root() -> dict:
    """API root, returns API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "Blog Pessoal API",
        "version": "1.0.0",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/api/health",
    }


@app.get("/api/health", summary="Verificação de saúde", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{API_HOST}:{API_PORT}"
    print(f"🌐 Servidor: {server_url}")
    print(f"📚 Documentação da API: {server_url}/docs")

    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
