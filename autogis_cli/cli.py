"""
AutoGIS CLI - Main entry point.

Validates and prints geometry catalogs declared in YAML.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from autogis_catalog import CatalogBuilder, CatalogConfig, CatalogConfigError
from autogis_catalog.builder import logger as catalog_logger
from autogis_geometry.logging import LogEvent, create_logger, geometry_logger


logger = create_logger("cli")


def _configure_logging(verbose: bool, catalog_level: str = "INFO") -> None:
    """Set level of the geometry, catalog and cli loggers."""
    level = logging.DEBUG if verbose else getattr(logging, catalog_level)
    catalog_logger.set_level(level)
    logger.set_level(level)
    if verbose:
        geometry_logger.set_level(logging.DEBUG)


def cmd_validate(config: CatalogConfig, builder: CatalogBuilder) -> int:
    """
    Validate every enabled geometry.

    Returns:
        0 if all geometries build, 1 otherwise
    """
    failures = builder.validate(config)

    for name, error in failures:
        print(f"invalid: {name}: {error}", file=sys.stderr)

    total = len(config.enabled_geometries)
    print(f"{total - len(failures)}/{total} geometries valid")
    return 1 if failures else 0


def cmd_show(
    config: CatalogConfig,
    builder: CatalogBuilder,
    name: Optional[str] = None
) -> int:
    """
    Print built geometries as JSON.

    Returns:
        0 on success, 1 if name is unknown
    """
    geometries = builder.build(config)

    if name is not None:
        if name not in geometries:
            print(f"Unknown geometry: {name}", file=sys.stderr)
            return 1
        geometries = {name: geometries[name]}

    output = {key: geometry.to_dict() for key, geometry in geometries.items()}
    print(json.dumps(output, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autogis-cli",
        description="AutoGIS CLI - Validate and inspect geometry catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check every geometry in a catalog
  autogis-cli validate config/catalog.yaml

  # Print all geometries as JSON
  autogis-cli show config/catalog.yaml

  # Print one geometry
  autogis-cli show config/catalog.yaml --name site
"""
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log geometry construction events (DEBUG)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    validate = subparsers.add_parser('validate', help='Validate a catalog')
    validate.add_argument('catalog', help='Path to catalog YAML')

    show = subparsers.add_parser('show', help='Print catalog geometries as JSON')
    show.add_argument('catalog', help='Path to catalog YAML')
    show.add_argument('--name', default=None, help='Only print this geometry')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger.info(
        event=LogEvent.CLI_COMMAND,
        message=f"Running {args.command}",
        metadata={'command': args.command, 'catalog': args.catalog}
    )

    try:
        config = CatalogConfig.from_yaml(args.catalog)
        _configure_logging(args.verbose, config.log_level)

        logger.info(
            event=LogEvent.CATALOG_LOADED,
            message="Loaded catalog",
            metadata={
                'catalog': args.catalog,
                'geometry_count': len(config.geometries),
            }
        )

        builder = CatalogBuilder()

        if args.command == 'validate':
            return cmd_validate(config, builder)
        return cmd_show(config, builder, args.name)

    except (FileNotFoundError, CatalogConfigError) as e:
        logger.error(
            event=LogEvent.CATALOG_ERROR,
            message="Catalog command failed",
            metadata={'command': args.command, 'catalog': args.catalog},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
