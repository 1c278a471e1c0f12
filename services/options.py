from typing import Callable, Dict

from models.hateoas import LinkInfo

# A LinkOption inserts one named LinkInfo into a link set. Hrefs may contain
# replaceable tokens like {id} or {name}, these are replaced by the values of
# the matching wire-level fields of the decorated object.
LinkOption = Callable[[Dict[str, LinkInfo]], None]


def _named(name: str, method: str, href: str, comment: str) -> LinkOption:
    def option(links: Dict[str, LinkInfo]) -> None:
        links[name] = LinkInfo(method=method, href=href, comment=comment)

    return option


def custom_link(name: str, info: LinkInfo) -> LinkOption:
    """Register an arbitrary named link with its own method."""
    def option(links: Dict[str, LinkInfo]) -> None:
        links[name] = info

    return option


def self_link(href: str, comment: str) -> LinkOption:
    """The url of the object itself, probably with an {id}."""
    return _named("self", "GET", href, comment)


def index_link(href: str, comment: str) -> LinkOption:
    """A general listing route for the type."""
    return _named("index", "GET", href, comment)


def post_link(href: str, comment: str) -> LinkOption:
    return _named("post", "POST", href, comment)


def put_link(href: str, comment: str) -> LinkOption:
    return _named("put", "PUT", href, comment)


def patch_link(href: str, comment: str) -> LinkOption:
    return _named("patch", "PATCH", href, comment)


def delete_link(href: str, comment: str) -> LinkOption:
    return _named("delete", "DELETE", href, comment)
