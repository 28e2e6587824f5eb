from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, PlainTextResponse

from app.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

INDEX_DOCUMENT = "index.html"

MIME_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".wav": "audio/wav",
    ".mp4": "video/mp4",
    ".woff": "application/font-woff",
    ".ttf": "application/font-ttf",
    ".eot": "application/vnd.ms-fontobject",
    ".otf": "application/font-otf",
    ".wasm": "application/wasm",
    ".ico": "image/x-icon",
    ".map": "application/json",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


def content_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


def resolve_asset(root: Path, request_path: str) -> Path | None:
    """Map a URL path onto a file under ``root``.

    Returns None when the path escapes the root or names nothing servable.
    A directory resolves to its own index document.
    """
    root = root.resolve()
    relative = request_path.lstrip("/") or INDEX_DOCUMENT

    try:
        candidate = (root / relative).resolve()
        if not candidate.is_relative_to(root):
            logger.warning("Rejected static path outside root: %s", request_path)
            return None
        if candidate.is_dir():
            candidate = candidate / INDEX_DOCUMENT
        if not candidate.is_file():
            return None
    except (OSError, ValueError):
        # Null bytes and overlong names land here.
        return None

    return candidate


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_static(
    full_path: str,
    settings: Settings = Depends(get_settings),
):
    asset = resolve_asset(settings.static_dir, full_path)
    if asset is None:
        asset = resolve_asset(settings.static_dir, INDEX_DOCUMENT)
    if asset is None:
        logger.error("Entry document missing under %s", settings.static_dir)
        return PlainTextResponse("Not Found", status_code=404)

    return FileResponse(asset, media_type=content_type_for(asset))
