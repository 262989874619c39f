"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: geometry, catalog, cli, error
    category: ring, validation, numeric_cast
    action: created, closed, loaded, built

Example Log Query (jq):
    jq 'select(.event == "error.validation") | .metadata'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geometry.*: Primitive construction
    - catalog.*: Catalog loading and building
    - cli.*: Command-line invocations
    - error.*: Error conditions
    """

    # ========== Geometry Events ==========
    GEOMETRY_CREATED = "geometry.created"
    """Geometry value constructed and validated."""

    RING_CLOSED = "geometry.ring.closed"
    """Open ring auto-closed by appending its first coordinate."""

    # ========== Catalog Events ==========
    CATALOG_LOADED = "catalog.loaded"
    """Catalog YAML parsed into CatalogConfig."""

    CATALOG_BUILT = "catalog.built"
    """All enabled catalog geometries constructed."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """CLI subcommand invoked."""

    # ========== Error Events ==========
    VALIDATION_ERROR = "error.validation"
    """Geometry failed cardinality or shape validation."""

    NUMERIC_CAST_ERROR = "error.numeric_cast"
    """Input value could not be cast to float64."""

    CATALOG_ERROR = "error.catalog"
    """Catalog file malformed or a declared geometry failed to build."""

