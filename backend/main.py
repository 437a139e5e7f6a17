"""Entry point for running the FastAPI application."""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from backend.src.services.config import get_config

if __name__ == "__main__":
    # CONTENT_DIR / AGENTS_DIR / PORT / LOG_LEVEL come from the environment or .env
    config = get_config()

    uvicorn.run(
        "backend.src.api.main:app",
        host="0.0.0.0",
        port=config.port,
        log_level=config.log_level,
        reload=True,
    )
