import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the repo root when running from a checkout
ROOT_DIR = Path(__file__).resolve().parents[1]
env_path = ROOT_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"

# Seed data (trucks, place names, recommendations, dashboard baseline)
DATA_DIR = Path(os.getenv("FLEETSENSE_DATA_DIR", str(PACKAGE_DATA_DIR)))

# Signal sampling; unset means a fresh seed every run
_seed = os.getenv("FLEETSENSE_SEED")
SIGNAL_SEED = int(_seed) if _seed else None

WEATHER_CACHE_TTL = float(os.getenv("FLEETSENSE_WEATHER_TTL", "300"))

LOG_LEVEL = os.getenv("FLEETSENSE_LOG_LEVEL", "INFO").upper()
