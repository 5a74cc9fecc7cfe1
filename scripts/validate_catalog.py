#!/usr/bin/env python3
"""Item catalog and configuration validation script."""

import sys
from pathlib import Path

from tradelog_app.catalog.items import ItemCatalog, load_catalog_file
from tradelog_app.config.loader import ConfigLoader
from tradelog_app.errors import CatalogCompileError, ConfigurationError


def main() -> None:
    """Main validation function."""
    args = sys.argv[1:]
    catalog_path = Path(args[0]) if args else None
    config_path = Path(args[1]) if len(args) > 1 else None

    all_valid = True

    print("Validating item catalog...")
    try:
        if catalog_path is not None:
            catalog = load_catalog_file(catalog_path)
        else:
            catalog = ItemCatalog.builtin()
        print(f"  OK: {len(catalog)} items compiled")
        for name in catalog.names:
            print(f"    - {name}")
    except CatalogCompileError as e:
        print(f"  FAILED: {e}")
        all_valid = False

    print("\nValidating configuration...")
    try:
        ConfigLoader.create(config_path).load()
        print("  OK: configuration is valid")
    except ConfigurationError as e:
        print(f"  FAILED: {e}")
        all_valid = False

    sys.exit(0 if all_valid else 1)


if __name__ == "__main__":
    main()
