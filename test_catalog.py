"""
Test Geometry Catalog
=====================

YAML catalog loading, geometry building, and the autogis-cli commands.

Usage:
    pytest test_catalog.py
"""

import json
import logging
import textwrap

import pytest

from autogis_catalog import (
    CatalogBuilder,
    CatalogConfig,
    CatalogConfigError,
    GeometrySpec,
)
from autogis_cli.cli import main as cli_main
from autogis_geometry import (
    InvalidGeometryInputError,
    LineString,
    Point,
    Polygon,
    PolygonRing,
    TooFewCoordsError,
)
from autogis_geometry.logging import LogEvent, StructuredLogger


CATALOG_YAML = """
log_level: "info"

geometries:
  - name: "origin"
    kind: "point"
    coordinates: [0, 0]

  - name: "road"
    kind: "line_string"
    coordinates: [[0, 0], [10, 5]]

  - name: "plot"
    kind: "polygon_ring"
    coordinates: [[0, 0], [0, 1], [1, 1]]

  - name: "site"
    kind: "polygon"
    coordinates:
      - [[0, 0], [10, 0], [10, 10], [0, 10]]
      - [[2, 2], [4, 2], [4, 4]]

  - name: "draft"
    kind: "line_string"
    coordinates: [[0, 0]]
    enabled: false
"""


def write_catalog(tmp_path, content, name="catalog.yaml"):
    path = tmp_path / name
    path.write_text(textwrap.dedent(content))
    return path


# ---------------- Config ---------------- #


def test_catalog_from_yaml(tmp_path):
    config = CatalogConfig.from_yaml(write_catalog(tmp_path, CATALOG_YAML))

    assert config.log_level == "INFO"
    assert [spec.name for spec in config.geometries] == [
        "origin", "road", "plot", "site", "draft",
    ]
    assert [spec.name for spec in config.enabled_geometries] == [
        "origin", "road", "plot", "site",
    ]


def test_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CatalogConfig.from_yaml(tmp_path / "missing.yaml")


def test_catalog_invalid_yaml(tmp_path):
    path = write_catalog(tmp_path, "geometries: [\n")
    with pytest.raises(CatalogConfigError):
        CatalogConfig.from_yaml(path)


def test_catalog_empty_file(tmp_path):
    config = CatalogConfig.from_yaml(write_catalog(tmp_path, ""))
    assert config.geometries == []


@pytest.mark.parametrize(
    "data",
    [
        {"geometries": [{"name": "a", "kind": "circle", "coordinates": [0, 0]}]},
        {"geometries": [{"name": "", "kind": "point", "coordinates": [0, 0]}]},
        {"geometries": [{"name": "a", "kind": "point"}]},
        {"geometries": [{"kind": "point", "coordinates": [0, 0]}]},
        {"geometries": [{"name": ["a"], "kind": "point", "coordinates": [0, 0]}]},
        {"geometries": [{"name": 7, "kind": "point", "coordinates": [0, 0]}]},
        {"geometries": [{"name": "a", "kind": "point", "coordinates": [0, 0], "enabled": "no"}]},
        {"geometries": [5]},
        {"geometries": "not a list"},
        {"log_level": "LOUD"},
        ["not", "a", "mapping"],
    ],
)
def test_catalog_rejects_malformed_data(data):
    with pytest.raises(CatalogConfigError):
        CatalogConfig.from_dict(data)


def test_catalog_rejects_duplicate_names():
    spec = GeometrySpec(name="a", kind="point", coordinates=[0, 0])
    with pytest.raises(CatalogConfigError, match="Duplicate"):
        CatalogConfig(geometries=[spec, spec])


# ---------------- Builder ---------------- #


def test_builder_builds_enabled_geometries(tmp_path):
    config = CatalogConfig.from_yaml(write_catalog(tmp_path, CATALOG_YAML))
    geometries = CatalogBuilder().build(config)

    assert set(geometries) == {"origin", "road", "plot", "site"}
    assert geometries["origin"] == Point(0, 0)
    assert geometries["road"] == LineString([[0, 0], [10, 5]])
    assert geometries["plot"] == PolygonRing([[0, 0], [0, 1], [1, 1]])
    assert isinstance(geometries["site"], Polygon)
    assert geometries["site"].num_rings() == 2


def test_builder_wraps_geometry_errors():
    config = CatalogConfig(geometries=[
        GeometrySpec(name="ok", kind="point", coordinates=[1, 2]),
        GeometrySpec(name="bad", kind="polygon", coordinates=[[[0, 0], [1, 1]]]),
    ])

    with pytest.raises(CatalogConfigError, match="'bad'") as exc_info:
        CatalogBuilder().build(config)

    cause = exc_info.value.__cause__
    assert isinstance(cause, TooFewCoordsError)
    assert cause.count == 2


def test_builder_rejects_malformed_point():
    spec = GeometrySpec(name="p", kind="point", coordinates=[[0, 0]])
    with pytest.raises(CatalogConfigError, match="'p'"):
        CatalogBuilder().build_one(spec)


def test_builder_validate_collects_every_failure():
    config = CatalogConfig(geometries=[
        GeometrySpec(name="short_line", kind="line_string", coordinates=[[0, 0]]),
        GeometrySpec(name="fine", kind="line_string", coordinates=[[0, 0], [1, 1]]),
        GeometrySpec(name="bad_value", kind="polygon_ring", coordinates=[[0, 0], [0, "y"], [1, 1]]),
    ])

    failures = CatalogBuilder().validate(config)

    assert [name for name, _ in failures] == ["short_line", "bad_value"]
    assert all(isinstance(error, CatalogConfigError) for _, error in failures)


@pytest.mark.parametrize(
    ("kind", "coordinates"),
    [("line_string", 5), ("polygon_ring", 2.5), ("polygon", [5, 6, 7])],
)
def test_builder_wraps_non_sequence_coordinates(kind, coordinates):
    spec = GeometrySpec(name="scalar", kind=kind, coordinates=coordinates)

    with pytest.raises(CatalogConfigError, match="'scalar'") as exc_info:
        CatalogBuilder().build_one(spec)
    assert isinstance(exc_info.value.__cause__, InvalidGeometryInputError)

    failures = CatalogBuilder().validate(CatalogConfig(geometries=[spec]))
    assert [name for name, _ in failures] == ["scalar"]


def test_builder_available_kinds():
    assert CatalogBuilder().available_kinds == [
        "line_string", "point", "polygon", "polygon_ring",
    ]


# ---------------- Structured logging ---------------- #


def test_structured_logger_emits_json(caplog):
    logger = StructuredLogger(component="test_json")
    caplog.set_level(logging.INFO, logger="autogis.test_json")

    logger.info(
        event=LogEvent.CATALOG_BUILT,
        message="Built 2 geometries",
        metadata={'geometry_count': 2}
    )
    logger.debug(event=LogEvent.GEOMETRY_CREATED, message="filtered out")

    assert len(caplog.records) == 1
    entry = json.loads(caplog.records[0].getMessage())
    assert entry["level"] == "INFO"
    assert entry["component"] == "test_json"
    assert entry["event"] == "catalog.built"
    assert entry["metadata"] == {'geometry_count': 2}


def test_structured_logger_records_exception(caplog):
    logger = StructuredLogger(component="test_errors")
    caplog.set_level(logging.INFO, logger="autogis.test_errors")

    error = CatalogConfigError("broken catalog")
    logger.error(event=LogEvent.CATALOG_ERROR, message="failed", exc_info=error)

    entry = json.loads(caplog.records[0].getMessage())
    assert entry["event"] == "error.catalog"
    assert entry["exception"] == {
        'type': 'CatalogConfigError',
        'message': 'broken catalog',
    }


def test_structured_logger_name_follows_component():
    assert StructuredLogger("naming").logger.name == "autogis.naming"


# ---------------- CLI ---------------- #


def test_cli_validate_success(tmp_path, capsys):
    path = write_catalog(tmp_path, CATALOG_YAML)

    assert cli_main(["validate", str(path)]) == 0
    assert "4/4 geometries valid" in capsys.readouterr().out


def test_cli_validate_failure(tmp_path, capsys):
    path = write_catalog(tmp_path, """
    geometries:
      - name: "short"
        kind: "line_string"
        coordinates: [[0, 0]]
      - name: "fine"
        kind: "point"
        coordinates: [1, 1]
    """)

    assert cli_main(["validate", str(path)]) == 1
    captured = capsys.readouterr()
    assert "1/2 geometries valid" in captured.out
    assert "invalid: short" in captured.err


def test_cli_show_prints_json(tmp_path, capsys):
    path = write_catalog(tmp_path, CATALOG_YAML)

    assert cli_main(["show", str(path), "--name", "plot"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "plot": {
            "kind": "polygon_ring",
            "coordinates": [[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [0.0, 0.0]],
        }
    }


def test_cli_show_unknown_name(tmp_path, capsys):
    path = write_catalog(tmp_path, CATALOG_YAML)

    assert cli_main(["show", str(path), "--name", "nowhere"]) == 1
    assert "Unknown geometry: nowhere" in capsys.readouterr().err


def test_cli_show_invalid_catalog(tmp_path, capsys):
    path = write_catalog(tmp_path, """
    geometries:
      - name: "hole"
        kind: "polygon"
        coordinates: [[[0, 0], [1, 1]]]
    """)

    assert cli_main(["show", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_validate_scalar_coordinates(tmp_path, capsys):
    path = write_catalog(tmp_path, """
    geometries:
      - name: "flat"
        kind: "line_string"
        coordinates: 5
    """)

    assert cli_main(["validate", str(path)]) == 1
    captured = capsys.readouterr()
    assert "0/1 geometries valid" in captured.out
    assert "invalid: flat" in captured.err


@pytest.mark.parametrize(
    "entry",
    [
        'name: [a]\n        kind: "point"\n        coordinates: [0, 0]',
        'name: "a"\n        kind: "point"\n        coordinates: [0, 0]\n        enabled: "no"',
    ],
)
def test_cli_rejects_mistyped_entries(tmp_path, capsys, entry):
    path = write_catalog(tmp_path, f"""
    geometries:
      - {entry}
    """)

    assert cli_main(["validate", str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_missing_catalog(tmp_path, capsys):
    assert cli_main(["validate", str(tmp_path / "missing.yaml")]) == 1
    assert "Catalog file not found" in capsys.readouterr().err


def test_cli_without_command(capsys):
    assert cli_main([]) == 1
    assert "usage" in capsys.readouterr().out
