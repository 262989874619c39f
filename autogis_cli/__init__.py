"""
AutoGIS CLI - Command-line interface for geometry catalogs.

Usage:
    autogis-cli validate config/catalog.yaml
    autogis-cli show config/catalog.yaml --name site
"""

__version__ = "0.1.0"
