"""
CatalogBuilder - builds geometry values from catalog declarations

Bounded Context: Catalog construction
Responsibilities:
  - Dispatch each GeometrySpec to its constructor by kind
  - Fail fast (build) or collect every failure (validate)
  - Log catalog progress as structured events

Pattern: Explicit kind -> constructor table
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from autogis_geometry import (
    GeometryError,
    LineString,
    Point,
    Polygon,
    PolygonRing,
)
from autogis_geometry.logging import LogEvent, StructuredLogger, create_logger

from .config import CatalogConfig, CatalogConfigError, GeometrySpec


logger = create_logger("catalog")


def _build_point(coordinates: Any) -> Point:
    # A point declaration is a single [x, y] pair
    if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
        raise CatalogConfigError(
            f"point coordinates must be [x, y], got {coordinates!r}"
        )
    x, y = coordinates
    return Point(x, y)


class CatalogBuilder:
    """
    Builds named geometries from a CatalogConfig.

    Constructors are looked up by GeometrySpec.kind. A failing geometry
    surfaces as CatalogConfigError naming the geometry, chained from the
    underlying GeometryError.

    Example:
        builder = CatalogBuilder()
        config = CatalogConfig.from_yaml("catalog.yaml")
        geometries = builder.build(config)
        geometries["site"].exterior
    """

    def __init__(self, custom_logger: Optional[StructuredLogger] = None):
        self.logger = custom_logger or logger
        self._constructors: Dict[str, Callable[[Any], Any]] = {
            "point": _build_point,
            "line_string": LineString,
            "polygon_ring": PolygonRing,
            "polygon": Polygon,
        }

    @property
    def available_kinds(self) -> List[str]:
        return sorted(self._constructors)

    def build_one(self, spec: GeometrySpec) -> Any:
        """
        Build a single geometry.

        Raises:
            CatalogConfigError: If the geometry fails to build
        """
        constructor = self._constructors[spec.kind]
        try:
            return constructor(spec.coordinates)
        except (GeometryError, CatalogConfigError) as e:
            raise CatalogConfigError(
                f"Geometry '{spec.name}' ({spec.kind}) is invalid: {e}"
            ) from e

    def build(self, config: CatalogConfig) -> Dict[str, Any]:
        """
        Build every enabled geometry in declaration order.

        Stops at the first failure.

        Returns:
            Dict mapping geometry name to its built value

        Raises:
            CatalogConfigError: First geometry that fails to build
        """
        geometries: Dict[str, Any] = {}
        for spec in config.enabled_geometries:
            try:
                geometries[spec.name] = self.build_one(spec)
            except CatalogConfigError as e:
                self.logger.error(
                    event=LogEvent.CATALOG_ERROR,
                    message="Catalog geometry failed to build",
                    metadata={'name': spec.name, 'kind': spec.kind},
                    exc_info=e
                )
                raise

        self.logger.info(
            event=LogEvent.CATALOG_BUILT,
            message=f"Built {len(geometries)} geometries",
            metadata={
                'geometry_count': len(geometries),
                'skipped': len(config.geometries) - len(geometries),
            }
        )
        return geometries

    def validate(self, config: CatalogConfig) -> List[Tuple[str, CatalogConfigError]]:
        """
        Build every enabled geometry independently, collecting failures.

        Returns:
            List of (geometry name, error), empty when all are valid
        """
        failures: List[Tuple[str, CatalogConfigError]] = []
        for spec in config.enabled_geometries:
            try:
                self.build_one(spec)
            except CatalogConfigError as e:
                failures.append((spec.name, e))
                self.logger.warning(
                    event=LogEvent.CATALOG_ERROR,
                    message="Catalog geometry is invalid",
                    metadata={'name': spec.name, 'kind': spec.kind, 'error': str(e)}
                )
        return failures
