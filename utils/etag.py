import hashlib
from typing import List

from fastapi import Request, Response

CACHE_CONTROL = "private, max-age=0, must-revalidate"


def generate_etag(body: bytes) -> str:
    """
    Generate an ETag from the rendered response body.

    The body already contains the injected links, so the ETag changes
    whenever either the object or its registered links change.
    """
    etag_hash = hashlib.md5(body).hexdigest()
    return f'"{etag_hash}"'


def _opaque_tag(etag: str) -> str:
    # If-None-Match compares weakly, W/"x" matches "x"
    return etag[2:] if etag.startswith("W/") else etag


def parse_if_none_match(request: Request) -> List[str]:
    """Entity tags listed by the client, weak prefixes removed."""
    header = request.headers.get("if-none-match", "")
    return [_opaque_tag(tag.strip()) for tag in header.split(",") if tag.strip()]


def check_etag_match(request: Request, current_etag: str) -> bool:
    """True when the client already holds the body tagged current_etag."""
    client_tags = parse_if_none_match(request)
    return "*" in client_tags or _opaque_tag(current_etag) in client_tags


def set_etag_headers(response: Response, etag: str) -> None:
    response.headers["ETag"] = etag
    response.headers["Cache-Control"] = CACHE_CONTROL
