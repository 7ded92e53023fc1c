import os, logging
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_RAPIDAPI_HOST = "terabox-downloader-direct-download-link-generator.p.rapidapi.com"
DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_LINK_MARKERS = ("terabox.app", "freeterabox.com")

# seconds
DEFAULT_FETCH_TIMEOUT = 120

BOT_MODES = ("polling", "webhook")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Config:
    port: int = DEFAULT_PORT
    bot_token: str = ""
    api_id: int = 0
    api_hash: str = ""
    bot_mode: str = "polling"
    rapidapi_key: str = ""
    rapidapi_host: str = DEFAULT_RAPIDAPI_HOST
    upload_dir: str = DEFAULT_UPLOAD_DIR
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    link_markers: tuple = DEFAULT_LINK_MARKERS

    @property
    def fetch_url(self):
        return f"https://{self.rapidapi_host}/fetch"


def _number(env, name, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _markers(raw):
    if not raw:
        return DEFAULT_LINK_MARKERS
    return tuple(m.strip() for m in raw.split(",") if m.strip()) or DEFAULT_LINK_MARKERS


def load_config(environ=None):
    """Build a Config from the environment, reading .env first when no mapping is given."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    mode = environ.get("BOT_MODE", "polling").strip().lower() or "polling"
    if mode not in BOT_MODES:
        raise ValueError(f"BOT_MODE must be one of {', '.join(BOT_MODES)}, got {mode!r}")

    return Config(
        port=_number(environ, "PORT", DEFAULT_PORT, int),
        bot_token=environ.get("BOT_TOKEN", ""),
        api_id=_number(environ, "API_ID", 0, int),
        api_hash=environ.get("API_HASH", ""),
        bot_mode=mode,
        rapidapi_key=environ.get("RAPIDAPI_KEY", ""),
        rapidapi_host=environ.get("RAPIDAPI_HOST") or DEFAULT_RAPIDAPI_HOST,
        upload_dir=environ.get("UPLOAD_DIR") or DEFAULT_UPLOAD_DIR,
        fetch_timeout=_number(environ, "FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT, float),
        link_markers=_markers(environ.get("LINK_MARKERS")),
    )


def configure_logging(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("pyrogram").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
