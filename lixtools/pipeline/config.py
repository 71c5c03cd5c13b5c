import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("false", "0", "no", "off")


# Backend serving the transcript / visit endpoints
TOOLS_API_BASE = os.getenv("TOOLS_API_BASE", "http://127.0.0.1:8000").rstrip("/")
TOKEN = os.getenv("TOKEN")
CSRF_TOKEN = os.getenv("CSRF_TOKEN")

TRANSCRIPT_ENDPOINT_PATH = "/api/search/transcript"
VISIT_LINKS_ENDPOINT_PATH = "/api/visit-links"
VISIT_LINKS_HTML_ENDPOINT_PATH = "/api/search/visit"

# 0 means no total timeout, a hung target holds the whole batch
FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "0")) or None

BLOCK_PRIVATE_TARGETS = _env_flag("BLOCK_PRIVATE_TARGETS", "false")
RESTRICTED_PORTS = [22, 23, 25, 135, 139, 445, 1433, 3306, 5432, 5010]
MAX_URL_LENGTH = 2048

# Environment snapshot
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en-US")
TIME_ZONE = os.getenv("TIME_ZONE") or os.getenv("TZ") or "UTC"
PREFERENCES_PATH = os.getenv(
    "PREFERENCES_PATH",
    os.path.join(os.path.expanduser("~"), ".lixtools", "preferences.json"),
)
LANGUAGE_PREFERENCE_KEY = "language"

# Gateway
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8010"))
X_REQ_ID_SLICE_SIZE = 8

# Messages
INVALID_URL_MESSAGE = "Invalid URL provided."
NO_CONTENT_MESSAGE = "No content extracted."
FETCH_FALLBACK_ERROR = "Failed to fetch or process content."
LINKS_REQUIRED_MESSAGE = "An array of links is required."
URL_REQUIRED_MESSAGE = "URL is required"
INVALID_VIDEO_URL_MESSAGE = "Invalid URL"

LOG_MESSAGE_PREVIEW_TRUNCATE = 80
ERROR_MESSAGE_TRUNCATE = 200
