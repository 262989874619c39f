"""
Configuration schema for geometry catalogs.

A catalog is a YAML file declaring named geometries by kind and raw
coordinates. Schema validation happens here; coordinate cardinality is
left to the geometry constructors (see builder.py).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union
import yaml


GEOMETRY_KINDS = ("point", "line_string", "polygon_ring", "polygon")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CatalogConfigError(ValueError):
    """Catalog file is malformed or a declared geometry failed to build."""

    pass


@dataclass(frozen=True)
class GeometrySpec:
    """
    One named geometry declaration.

    Coordinate nesting depends on kind:
    - point: [x, y]
    - line_string, polygon_ring: [[x, y], ...]
    - polygon: [[[x, y], ...], ...]  (exterior first, then holes)
    """

    name: str
    kind: str
    coordinates: Any
    enabled: bool = True

    def __post_init__(self):
        """Validate geometry declaration."""
        if not isinstance(self.name, str):
            raise CatalogConfigError(
                f"geometry name must be a string, got {self.name!r}"
            )
        if not self.name:
            raise CatalogConfigError("geometry name cannot be empty")

        # YAML "no"/"off" strings are truthy; only real booleans count
        if not isinstance(self.enabled, bool):
            raise CatalogConfigError(
                f"enabled for geometry '{self.name}' must be true or false, "
                f"got {self.enabled!r}"
            )

        if self.kind not in GEOMETRY_KINDS:
            raise CatalogConfigError(
                f"Invalid kind for geometry '{self.name}': {self.kind}. "
                f"Must be one of {GEOMETRY_KINDS}"
            )

        if self.coordinates is None:
            raise CatalogConfigError(
                f"Geometry '{self.name}' has no coordinates"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeometrySpec":
        """
        Deserialize from dict.

        Raises:
            CatalogConfigError: If required keys missing
        """
        try:
            return cls(
                name=data["name"],
                kind=data["kind"],
                coordinates=data["coordinates"],
                enabled=data.get("enabled", True),
            )
        except KeyError as e:
            raise CatalogConfigError(f"Missing required geometry field: {e}") from e
        except TypeError as e:
            raise CatalogConfigError(f"Invalid geometry entry: {data!r}") from e


@dataclass(frozen=True)
class CatalogConfig:
    """
    Geometry catalog loaded from YAML.

    Immutable after construction (frozen dataclass).
    """

    geometries: List[GeometrySpec] = field(default_factory=list)
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate catalog configuration."""
        if self.log_level not in LOG_LEVELS:
            raise CatalogConfigError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {LOG_LEVELS}"
            )

        seen = set()
        for spec in self.geometries:
            if spec.name in seen:
                raise CatalogConfigError(f"Duplicate geometry name: '{spec.name}'")
            seen.add(spec.name)

    @property
    def enabled_geometries(self) -> List[GeometrySpec]:
        return [spec for spec in self.geometries if spec.enabled]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Build config from parsed YAML data."""
        if not isinstance(data, dict):
            raise CatalogConfigError(
                f"Catalog must be a mapping, got {type(data).__name__}"
            )

        geometries_data = data.get("geometries") or []
        if not isinstance(geometries_data, list):
            raise CatalogConfigError("'geometries' must be a list")

        geometries = [GeometrySpec.from_dict(g) for g in geometries_data]

        return cls(
            geometries=geometries,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CatalogConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            log_level: "INFO"

            geometries:
              - name: "origin"
                kind: "point"
                coordinates: [0, 0]

              - name: "road"
                kind: "line_string"
                coordinates: [[0, 0], [10, 5]]

              - name: "site"
                kind: "polygon"
                coordinates:
                  - [[0, 0], [10, 0], [10, 10], [0, 10]]
                  - [[2, 2], [4, 2], [4, 4]]
                enabled: true

        Raises:
            FileNotFoundError: If yaml_path does not exist
            CatalogConfigError: If YAML is invalid or schema violated
        """
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogConfigError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data or {})
