from __future__ import annotations

from pathlib import Path

import pytest

from catalog.types import (
    TypeCatalog,
    UnknownTypeError,
    create,
    list_types,
    print_types,
    resolve_type,
)
from entities.markers import OVO, OWO, UWU
from entities.numeric import NonFiniteValueError, NumericEntity
from settings.config import FixtureConfig, load_config


def test_print_types_lists_declared_types_in_order(
    capsys: pytest.CaptureFixture[str],
) -> None:
    print_types()

    assert capsys.readouterr().out.splitlines() == [
        "Tests.NumericEntity",
        "Tests.UWU",
        "Tests.OWO",
        "Tests.OVO",
    ]


def test_list_types_uses_given_namespace() -> None:
    records = list_types("Harness.Samples")

    assert [r.qualified_name for r in records] == [
        "Harness.Samples.NumericEntity",
        "Harness.Samples.UWU",
        "Harness.Samples.OWO",
        "Harness.Samples.OVO",
    ]
    assert {r.namespace for r in records} == {"Harness.Samples"}


def test_entity_record_exposes_public_surface() -> None:
    entity_record = list_types()[0]

    assert entity_record.kind == "entity"
    assert entity_record.field_names == ["value"]
    assert "render" in entity_record.method_names
    assert "_increment" not in entity_record.method_names


def test_marker_records_are_empty() -> None:
    markers = [r for r in list_types() if r.kind == "marker"]

    assert [r.name for r in markers] == ["UWU", "OWO", "OVO"]
    for record in markers:
        assert record.field_names == []
        assert record.method_names == []


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("NumericEntity", NumericEntity),
        ("Tests.NumericEntity", NumericEntity),
        ("UWU", UWU),
        ("Tests.OWO", OWO),
        ("OVO", OVO),
    ],
)
def test_resolve_type(name: str, expected: type) -> None:
    assert resolve_type(name) is expected


@pytest.mark.parametrize("name", ["Missing", "Tests.Missing", "Other.UWU", ""])
def test_resolve_unknown_type_raises(name: str) -> None:
    with pytest.raises(UnknownTypeError):
        resolve_type(name)


def test_unknown_type_is_lookup_error() -> None:
    with pytest.raises(LookupError):
        create("Nope")


def test_resolve_in_custom_namespace() -> None:
    assert resolve_type("Harness.UWU", namespace="Harness") is UWU

    with pytest.raises(UnknownTypeError):
        resolve_type("Tests.UWU", namespace="Harness")


def test_create_builds_fresh_default_entity() -> None:
    entity = create("Tests.NumericEntity")

    assert isinstance(entity, NumericEntity)
    assert entity.render_text() == "MyPublicFloatVar = 5.00"


def test_markers_construct_independently() -> None:
    entity = create("NumericEntity")
    assert isinstance(entity, NumericEntity)
    entity._increment(1.0)

    instances = [create(name) for name in ("UWU", "OWO", "OVO")]
    again = [create(name) for name in ("UWU", "OWO", "OVO")]

    assert [type(i) for i in instances] == [UWU, OWO, OVO]
    for first, second in zip(instances, again):
        assert first is not second
        assert type(first) is type(second)
        assert vars(first) == {}
    assert len({UWU, OWO, OVO}) == 3
    assert entity.value == 6.0


def test_catalog_uses_namespace_from_config_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "fixture.toml").write_text('namespace = "Harness"', encoding="utf-8")
    catalog = TypeCatalog.from_config(load_config(tmp_path))

    catalog.print_types()

    assert capsys.readouterr().out.splitlines() == [
        "Harness.NumericEntity",
        "Harness.UWU",
        "Harness.OWO",
        "Harness.OVO",
    ]
    assert catalog.resolve_type("Harness.OVO") is OVO
    with pytest.raises(UnknownTypeError):
        catalog.resolve_type("Tests.OVO")


def test_catalog_entities_inherit_configured_guard() -> None:
    catalog = TypeCatalog.from_config(FixtureConfig(reject_non_finite=True))

    entity = catalog.create("NumericEntity")

    assert isinstance(entity, NumericEntity)
    with pytest.raises(NonFiniteValueError):
        entity._increment(float("inf"))
    assert type(catalog.create("UWU")) is UWU
