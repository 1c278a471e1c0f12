from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import RootModel
from pydantic_core import PydanticSerializationError, to_json

from config.settings import settings
from services.fields import NotARecordError, field_name_for, is_record_type
from services.registry import LinkRegistry, concrete_type, type_name_of

logger = logging.getLogger(__name__)

# Matches tokens in the form of {token}
TOKEN_PATTERN = re.compile(r"{([^{}]*)}")

_MISSING = object()


# -----------------------------------------------------------------------------
# Token substitution
# -----------------------------------------------------------------------------
def _wire_string(value: Any) -> str:
    """Renders a decoded json value the way it looked on the wire."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def replace_tokens(href: str, node: Dict[str, Any]) -> str:
    """
    Replaces every {token} in href with node[token] in a single pass, so
    substituted values are never scanned for tokens again. Unknown tokens are
    left as is.
    """
    def substitute(match: re.Match) -> str:
        token = match.group(1)
        if token not in node:
            return match.group(0)
        return _wire_string(node[token])

    return TOKEN_PATTERN.sub(substitute, href)


# -----------------------------------------------------------------------------
# Tree walking
# -----------------------------------------------------------------------------
def inject_on(registry: LinkRegistry, obj: Any, node: Dict[str, Any]) -> bool:
    """
    Sets the links registered for obj's type on node, if there are any.
    Returns whether links were written.
    """
    # obj and node disagree, e.g. a None field serialized as {}
    if not node:
        return False

    links = registry.links_for(type_name_of(obj))
    if not links:
        return False

    node[settings.LINKS_KEY] = {
        name: {
            "method": info.method,
            "href": replace_tokens(info.href, node),
            "comment": info.comment,
        }
        for name, info in links.items()
    }
    return True


def walk_through_object(registry: LinkRegistry, obj: Any, node: Any, by_alias: bool = True) -> None:
    """
    Walks the decoded json node alongside obj and injects links into every
    object it comes across. Anything that does not line up is skipped.
    """
    if node is None:
        return

    # A RootModel is dumped as its root value
    if isinstance(obj, RootModel):
        obj = obj.root

    if isinstance(node, list):
        # Pair every entry with the object at the same position
        for index, item in enumerate(node):
            try:
                element = obj[index]
            except (IndexError, KeyError, TypeError):
                logger.debug("No element at index %d of %s, skipping", index, type(obj).__name__)
                continue
            walk_through_object(registry, element, item, by_alias)

    elif isinstance(node, dict):
        injected = inject_on(registry, obj, node)

        for json_key, value in list(node.items()):
            # Freshly written links hold no objects
            if injected and json_key == settings.LINKS_KEY:
                continue
            if not isinstance(value, (dict, list)):
                continue

            try:
                field_name = field_name_for(obj, json_key, by_alias)
            except NotARecordError:
                continue

            if field_name is None:
                continue

            field_value = getattr(obj, field_name, _MISSING)
            if field_value is _MISSING:
                continue

            walk_through_object(registry, field_value, value, by_alias)


def _walkable(obj: Any) -> bool:
    """Whether obj is an object, or a (nested) list holding at least one."""
    if isinstance(obj, (list, tuple)):
        return any(_walkable(item) for item in obj)
    return is_record_type(concrete_type(obj)) and not isinstance(obj, type)


def inject_links(
    registry: LinkRegistry,
    obj: Any,
    *,
    by_alias: Optional[bool] = None,
    exclude_none: Optional[bool] = None,
) -> bytes:
    """
    Similar to pydantic_core.to_json, but injects links into the response if
    the registry has any for the types it encounters, recursively.
    """
    if by_alias is None:
        by_alias = settings.BY_ALIAS
    if exclude_none is None:
        exclude_none = settings.EXCLUDE_NONE

    try:
        raw_response = to_json(obj, by_alias=by_alias, exclude_none=exclude_none)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.warning("Could not serialize %s: %s", type(obj).__name__, e)
        return b"null"

    # Prevent an unnecessary decode/encode round trip
    if not _walkable(obj):
        return raw_response

    result = json.loads(raw_response)
    walk_through_object(registry, obj, result, by_alias)

    return to_json(result)
