"""Tests for mapping wire keys back to attribute names."""

from dataclasses import dataclass, field
from typing import Optional

import pytest
from pydantic import BaseModel, Field, computed_field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from models.bakery import Bakery, Cupcake
from services.fields import NotARecordError, field_name_for, wire_keys_for


class Shop(BaseModel):
    shop_id: int = Field(serialization_alias="shopId")
    owner: str = Field(alias="ownerName")
    secret: str = Field("hidden", exclude=True)
    cupcakes: list[Cupcake] = Field(default_factory=list, serialization_alias="items")


@dataclass
class Oven:
    id: int
    temperature: float = 180.0
    trays: list = field(default_factory=list)


@pydantic_dataclass
class Mixer:
    mixer_id: int = Field(serialization_alias="mixerId")


class TestModelFields:
    """Test pydantic models."""

    def test_plain_field(self) -> None:
        assert field_name_for(Bakery, "cupcakes") == "cupcakes"

    def test_serialization_alias(self) -> None:
        assert field_name_for(Shop, "shopId") == "shop_id"
        assert field_name_for(Shop, "items") == "cupcakes"

    def test_alias(self) -> None:
        assert field_name_for(Shop, "ownerName") == "owner"

    def test_attribute_name_is_not_a_wire_key_when_aliased(self) -> None:
        assert field_name_for(Shop, "shop_id") is None

    def test_by_alias_false_uses_attribute_names(self) -> None:
        assert field_name_for(Shop, "shop_id", by_alias=False) == "shop_id"
        assert field_name_for(Shop, "shopId", by_alias=False) is None

    def test_excluded_field_is_skipped(self) -> None:
        assert field_name_for(Shop, "secret") is None
        assert "secret" not in wire_keys_for(Shop)

    def test_unknown_key(self) -> None:
        assert field_name_for(Bakery, "_links") is None

    def test_computed_field(self) -> None:
        class Order(BaseModel):
            id: int

            @computed_field
            @property
            def top(self) -> Cupcake:
                return Cupcake(id=self.id, name="top")

        assert field_name_for(Order, "top") == "top"


class TestDataclassFields:
    """Test stdlib and pydantic dataclasses."""

    def test_stdlib_dataclass(self) -> None:
        assert wire_keys_for(Oven) == {"id": "id", "temperature": "temperature", "trays": "trays"}

    def test_pydantic_dataclass_alias(self) -> None:
        assert field_name_for(Mixer, "mixerId") == "mixer_id"
        assert field_name_for(Mixer, "mixer_id", by_alias=False) == "mixer_id"


class TestWrappedTypes:
    """Test lookups through instances and wrappers."""

    @pytest.mark.parametrize(
        "obj",
        [
            Bakery(id=1, name="a"),
            Optional[Bakery],
            list[list[Bakery]],
            [Bakery(id=1, name="a")],
        ],
    )
    def test_wrapped_lookup(self, obj: object) -> None:
        assert field_name_for(obj, "cupcake") == "cupcake"

    def test_mapping_is_cached_per_type(self) -> None:
        assert wire_keys_for(Bakery) is wire_keys_for(Bakery(id=1, name="a"))
        assert wire_keys_for(Bakery) is wire_keys_for(Optional[Bakery])


class TestNotARecord:
    """Test failures on things that have no fields."""

    @pytest.mark.parametrize("obj", [5, "abc", {"id": 1}, list[int], None, [], Optional[int]])
    def test_raises(self, obj: object) -> None:
        with pytest.raises(NotARecordError):
            field_name_for(obj, "id")

    def test_is_a_type_error(self) -> None:
        assert issubclass(NotARecordError, TypeError)
