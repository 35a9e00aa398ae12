"""Configuration: env, data paths, bundled reference resources."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of coinmark package)
BASE_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent

# Load .env from project root so COINMARK_DATA_DIR etc. are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("COINMARK_DATA_DIR", str(BASE_DIR / "data")))
COINS_PATH = DATA_DIR / "coins.json"

# Reference data shipped with the package, imported in this order on first start
RESOURCES_DIR = PACKAGE_DIR / "resources"
REFERENCE_RESOURCES = ("national_parks", "american_women")

# API
API_HOST = os.getenv("COINMARK_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("COINMARK_API_PORT", "8000"))


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
