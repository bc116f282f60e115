import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("CATALOG_DATA_DIR", BASE_DIR / "data"))

SEED_PATH = Path(os.getenv("CATALOG_SEED_PATH", DATA_DIR / "movies.jsonl"))

LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))
