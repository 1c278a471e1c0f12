from pydantic import BaseModel, ConfigDict


class LinkInfo(BaseModel):
    """A link to a resource. Hrefs may contain {token} placeholders."""
    method: str       # "GET", "POST", "PUT", "PATCH", "DELETE"
    href: str         # "/api/v1/bakeries/{id}"
    comment: str      # human readable description

    model_config = ConfigDict(frozen=True)
