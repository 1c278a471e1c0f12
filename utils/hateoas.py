from typing import Any, Optional

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from services.injector import inject_links
from services.registry import LinkRegistry, default_link_registry
from utils.etag import check_etag_match, generate_etag, set_etag_headers


# -----------------------------------------------------------------------------
# Response class
# -----------------------------------------------------------------------------
class HATEOASResponse(JSONResponse):
    """
    JSONResponse that renders its content with links injected.
    Return it from an endpoint directly, FastAPI would otherwise encode the
    content to plain dicts first and the model types would be lost.
    Subclass and override `registry` to use something other than the default.
    """
    registry: LinkRegistry = default_link_registry

    def render(self, content: Any) -> bytes:
        return inject_links(self.registry, content)


# -----------------------------------------------------------------------------
# Conditional responses
# -----------------------------------------------------------------------------
def hateoas_response(
    request: Request,
    data: Any,
    registry: Optional[LinkRegistry] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """
    Renders data with links and handles If-None-Match.

    Returns 304 Not Modified when the client already has this exact body.
    """
    if registry is None:
        registry = default_link_registry

    body = inject_links(registry, data)
    etag = generate_etag(body)

    if check_etag_match(request, etag):
        response = Response(status_code=status.HTTP_304_NOT_MODIFIED)
    else:
        response = Response(content=body, status_code=status_code, media_type="application/json")

    set_etag_headers(response, etag)
    return response
