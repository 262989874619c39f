"""
AutoGIS Catalog
===============

Bounded Context: Named geometry declarations loaded from YAML.

Public API
----------
    GeometrySpec: One named geometry declaration
    CatalogConfig: Validated catalog (from_yaml / from_dict)
    CatalogConfigError: Malformed catalog or invalid geometry
    CatalogBuilder: Builds geometries from a CatalogConfig

Example:
    >>> from autogis_catalog import CatalogConfig, CatalogBuilder
    >>> config = CatalogConfig.from_yaml("catalog.yaml")
    >>> geometries = CatalogBuilder().build(config)
"""

from .config import GeometrySpec, CatalogConfig, CatalogConfigError, GEOMETRY_KINDS
from .builder import CatalogBuilder

__all__ = [
    'GeometrySpec',
    'CatalogConfig',
    'CatalogConfigError',
    'CatalogBuilder',
    'GEOMETRY_KINDS',
]
