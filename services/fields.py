from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from services.registry import concrete_type, type_name_of

logger = logging.getLogger(__name__)


class NotARecordError(TypeError):
    """Raised when field names are requested from something that is not a model or dataclass."""


# Wire keys per (type identity, by_alias), so we don't inspect a type's fields
# every time we need to map a json key back to an attribute.
_field_cache: Dict[Tuple[str, bool], Dict[str, str]] = {}
_field_cache_lock = threading.Lock()


def is_record_type(tp: Optional[type]) -> bool:
    if tp is None:
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)


def _field_info_wire_keys(fields: Dict[str, FieldInfo], by_alias: bool) -> Dict[str, str]:
    keys: Dict[str, str] = {}
    for name, info in fields.items():
        # exclude=True never reaches the wire
        if info.exclude:
            continue

        wire_key = name
        if by_alias:
            wire_key = info.serialization_alias or info.alias or name

        # Last one wins on duplicates
        keys[wire_key] = name
    return keys


def _model_wire_keys(model: type[BaseModel], by_alias: bool) -> Dict[str, str]:
    keys = _field_info_wire_keys(model.model_fields, by_alias)

    # Computed fields are dumped too and may hold nested models
    for name, info in model.model_computed_fields.items():
        keys[(info.alias if by_alias else None) or name] = name

    return keys


def _dataclass_wire_keys(cls: type, by_alias: bool) -> Dict[str, str]:
    # pydantic dataclasses carry FieldInfo with aliases, plain ones dump by name
    pydantic_fields = getattr(cls, "__pydantic_fields__", None)
    if pydantic_fields is not None:
        return _field_info_wire_keys(pydantic_fields, by_alias)

    return {field.name: field.name for field in dataclasses.fields(cls)}


def wire_keys_for(obj: Any, by_alias: bool = True) -> Dict[str, str]:
    """
    Maps every wire-level key of obj's record type to the attribute holding it.

    obj may be an instance, a class or an alias like Optional[Model]. The
    mapping is built once per type and cached for the life of the process.

    Raises NotARecordError if obj is not a pydantic model or a dataclass.
    """
    tp = concrete_type(obj)
    if not is_record_type(tp):
        raise NotARecordError(f"{type_name_of(obj) or type(obj).__name__} is not a model or dataclass")

    cache_key = (type_name_of(tp), by_alias)

    cached = _field_cache.get(cache_key)
    if cached is not None:
        return cached

    with _field_cache_lock:
        # Another thread may have populated it while we waited
        cached = _field_cache.get(cache_key)
        if cached is not None:
            return cached

        if issubclass(tp, BaseModel):
            keys = _model_wire_keys(tp, by_alias)
        else:
            keys = _dataclass_wire_keys(tp, by_alias)

        _field_cache[cache_key] = keys
        logger.debug("Cached %d wire key(s) for %s", len(keys), cache_key[0])
        return keys


def field_name_for(obj: Any, wire_key: str, by_alias: bool = True) -> Optional[str]:
    """Returns the attribute name serialized under wire_key, or None."""
    return wire_keys_for(obj, by_alias).get(wire_key)


def clear_field_cache() -> None:
    with _field_cache_lock:
        _field_cache.clear()
