"""Tests for binding-key declarations."""

import dataclasses
from dataclasses import dataclass

from dotprops.domain.tags import PROPERTY_METADATA_KEY, Property, binding_key, prop


@dataclass
class _Tagged:
    name: str = prop("app.name", default="", metadata={"doc": "the name"})
    items: list[str] = prop("app.items", default_factory=list)


class TestProp:
    def test_stores_key_in_metadata(self) -> None:
        fields = {f.name: f for f in dataclasses.fields(_Tagged)}
        assert fields["name"].metadata[PROPERTY_METADATA_KEY] == "app.name"

    def test_preserves_caller_metadata(self) -> None:
        fields = {f.name: f for f in dataclasses.fields(_Tagged)}
        assert fields["name"].metadata["doc"] == "the name"

    def test_defaults_forwarded(self) -> None:
        obj = _Tagged()
        assert obj.name == ""
        assert obj.items == []


class TestBindingKey:
    def test_annotated_marker(self) -> None:
        assert binding_key([Property("a.b")], {}) == "a.b"

    def test_metadata(self) -> None:
        assert binding_key([], {PROPERTY_METADATA_KEY: "x.y"}) == "x.y"

    def test_annotated_wins(self) -> None:
        assert binding_key([Property("from.marker")], {PROPERTY_METADATA_KEY: "from.meta"}) == (
            "from.marker"
        )

    def test_unbound(self) -> None:
        assert binding_key([], {}) is None

    def test_empty_key_is_unbound(self) -> None:
        assert binding_key([Property("")], {}) is None
        assert binding_key([], {PROPERTY_METADATA_KEY: ""}) is None

    def test_other_metadata_ignored(self) -> None:
        assert binding_key(["not a marker", 3], {"doc": "x"}) is None
