"""Runtime configuration for Noor Hub, read from the environment."""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo")

# When empty, AI requests are served in-process instead of over HTTP
BACKEND_URL = os.getenv("NOORHUB_BACKEND_URL", "")

DATA_DIR = Path(os.getenv("NOORHUB_DATA_DIR") or Path.home() / ".noorhub")
STORE_PATH = DATA_DIR / "store.json"

LOG_LEVEL = os.getenv("NOORHUB_LOG_LEVEL", "INFO")

# API URLs
PRAYER_API_URL = "https://api.aladhan.com/v1/timings"
QURAN_API_URL = "https://api.alquran.cloud/v1"
QURAN_AUDIO_URL = "https://cdn.islamic.network/quran/audio/128/ar.alafasy"
QURAN_SURAH_AUDIO_URL = "https://cdn.islamic.network/quran/audio-surah/128/ar.alafasy"
SHARE_LINK = "https://noorislamichub.com/hadith-explorer"

# Request timeout and retry parameters
REQUEST_TIMEOUT = 10  # seconds
MAX_RETRIES = 3
RETRY_DELAY = 1  # seconds, multiplied by the attempt number
MAX_CONCURRENT_REQUESTS = 5

# Islamic Society of North America
PRAYER_METHOD = 2

GEOLOCATION_TIMEOUT_SECONDS = 5
NOMINATIM_USER_AGENT = "noorhub"


def configure_logging(level=None):
    """Set up root logging once for the app and the proxy server."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
