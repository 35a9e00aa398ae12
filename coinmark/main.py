"""Entry: start API server (reference data is preloaded on startup)."""
import logging
import uvicorn

from coinmark.config import API_HOST, API_PORT

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    uvicorn.run(
        "coinmark.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
