from __future__ import annotations

import collections.abc
import logging
import threading
import types
from typing import Annotated, Any, Dict, Optional, Union, get_args, get_origin

from models.hateoas import LinkInfo
from services.options import LinkOption

logger = logging.getLogger(__name__)

_WRAPPERS = (list, tuple, set, frozenset, collections.abc.Sequence, collections.abc.Set)


# -----------------------------------------------------------------------------
# Type identity
# -----------------------------------------------------------------------------
def _unwrap_alias(tp: Any) -> Optional[Any]:
    """Strip Optional and container parameters from a type until a class remains."""
    origin = get_origin(tp)
    if origin is None:
        return tp

    args = get_args(tp)

    if origin is Annotated:
        return _unwrap_alias(args[0])

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        # Optional[T] is a single record, Union[A, B] is not
        if len(members) != 1:
            return None
        return _unwrap_alias(members[0])

    if isinstance(origin, type) and issubclass(origin, _WRAPPERS) and not issubclass(origin, (str, bytes)):
        if not args:
            return None
        return _unwrap_alias(args[0])

    return origin


def concrete_type(obj: Any) -> Optional[type]:
    """
    Returns the record class behind obj, which may be a class, a typing alias
    like list[T] or Optional[T], or an instance. Lists carry no element type
    at runtime so their first element stands in for it.
    """
    if obj is None:
        return None

    if get_origin(obj) is not None or isinstance(obj, type):
        unwrapped = _unwrap_alias(obj)
        return unwrapped if isinstance(unwrapped, type) else None

    if isinstance(obj, (list, tuple)):
        return concrete_type(obj[0]) if obj else None

    return type(obj)


def type_name_of(obj: Any) -> str:
    """Fully qualified name of obj's record type, independent of wrapping."""
    tp = concrete_type(obj)
    if tp is None:
        return ""

    return f"{tp.__module__}.{tp.__qualname__}"


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------
class LinkRegistry:
    """Links registered per type identity, used to populate responses."""

    def __init__(self) -> None:
        self._links: Dict[str, Dict[str, LinkInfo]] = {}
        self._lock = threading.Lock()

    def set_links(self, name: str, links: Dict[str, LinkInfo]) -> None:
        with self._lock:
            self._links[name] = links

    def links_for(self, name: str) -> Dict[str, LinkInfo]:
        with self._lock:
            return self._links.get(name, {})

    def clear(self) -> None:
        with self._lock:
            self._links.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._links

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)


def new_link_registry() -> LinkRegistry:
    """A fresh registry, for tests or when the default one should not be shared."""
    return LinkRegistry()


# Global registry used by register()
default_link_registry = new_link_registry()


def register_on(registry: LinkRegistry, obj: Any, *options: LinkOption) -> None:
    """
    Registers links on obj's type in the given registry. Any earlier
    registration for the same type is replaced, not merged.
    """
    links: Dict[str, LinkInfo] = {}
    for option in options:
        option(links)

    name = type_name_of(obj)
    registry.set_links(name, links)
    logger.debug("Registered %d link(s) on %s", len(links), name)


def register(obj: Any, *options: LinkOption) -> None:
    """Registers links on obj's type using the default registry."""
    register_on(default_link_registry, obj, *options)
