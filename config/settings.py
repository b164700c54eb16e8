# config/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"Environment variable {name} must be > 0, got {value}")
    return value


class Settings:
    # Marker that identifies a listing line carrying a resource handle
    HANDLE_MARKER = "<H:"

    # Links are built as f"{LINK_PREFIX}/{handle}"
    LINK_PREFIX = _env_str("MEGAPICK_LINK_PREFIX", "https://mega.nz/file")

    # Batch draw size used when the caller does not pass one
    DEFAULT_BATCH_SIZE = _env_int("MEGAPICK_BATCH_SIZE", 10)

    # Where the script writes batch exports
    EXPORT_DIR = _env_str("MEGAPICK_EXPORT_DIR", "data/exports")

    # Upload guard for the Streamlit app
    MAX_UPLOAD_BYTES = _env_int("MEGAPICK_MAX_UPLOAD_BYTES", 5_000_000)

    LOG_LEVEL = _env_str("MEGAPICK_LOG_LEVEL", "INFO")

    # Shown once when a listing produced no records.
    EMPTY_LISTING_MESSAGE = (
        "Could not find any valid file entries. Please ensure you copy-pasted the "
        "lines containing file paths and handles (e.g., /path/to/file.jpg <H:handle>)."
    )

    # Extension sets used by the category classifier.
    CATEGORY_EXTENSIONS = {
        "image": ["jpg", "jpeg", "png", "gif", "bmp", "webp"],
        "video": ["mp4", "avi", "mov", "wmv", "flv", "mkv", "webm"],
        "audio": ["mp3", "wav", "flac", "aac", "ogg"],
        "document": ["pdf", "doc", "docx", "txt", "rtf"],
    }

settings = Settings()
