"""File category lookup by extension.

Categories are a pure function of the (lowercased) extension. The extension
sets live in ``settings.CATEGORY_EXTENSIONS``; anything not listed there,
including the empty extension, is classified as ``"file"``.
"""
from __future__ import annotations

from typing import Dict

from config.settings import settings

FALLBACK_CATEGORY = "file"

# extension -> category, built once from the settings lists
EXTENSION_TO_CATEGORY: Dict[str, str] = {
    ext: category
    for category, exts in settings.CATEGORY_EXTENSIONS.items()
    for ext in exts
}

CATEGORY_ICONS: Dict[str, str] = {
    "image": "🖼️",
    "video": "🎥",
    "audio": "🎵",
    "document": "📄",
    FALLBACK_CATEGORY: "📁",
}


def classify(extension: str) -> str:
    """Return the category for ``extension``.

    Args:
        extension: Extension without the leading dot. Callers pass it
            lowercased already; the lookup lowercases again so ``"PNG"`` and
            ``"png"`` agree.

    Returns:
        One of ``"image"``, ``"video"``, ``"audio"``, ``"document"`` or
        ``"file"``.
    """
    if not extension:
        return FALLBACK_CATEGORY
    return EXTENSION_TO_CATEGORY.get(extension.lower(), FALLBACK_CATEGORY)


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, CATEGORY_ICONS[FALLBACK_CATEGORY])
