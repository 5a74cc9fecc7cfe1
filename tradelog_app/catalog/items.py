"""
Item keyword catalog.

The catalog is an ordered list of ``(item name, [patterns])`` pairs. Order is
significant: the first item with any matching pattern claims the message, so
more specific items must come before the generic ones they overlap with.
"""

import re
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import structlog
import yaml

from ..errors import CatalogCompileError

logger = structlog.get_logger(__name__)

CatalogEntries = list[tuple[str, list[str]]]


BUILTIN_ITEM_KEYWORDS: CatalogEntries = [
    # Specific variants first
    ("Shiny Dragon Egg", [r"\bshiny\s+dragon\s+eggs?\b", r"\bshiny\s+egg\b"]),
    ("Dragon Egg", [r"\bdragon\s+eggs?\b", r"\bd\.?\s?egg\b"]),
    ("Golden Key", [r"\bgold(en)?\s+keys?\b", r"\bgkeys?\b"]),
    ("Mystery Crate", [r"\bmystery\s+(crates?|box(es)?)\b", r"\bm\.?\s?crates?\b"]),
    ("Phoenix Feather", [r"\bphoenix\s+feathers?\b", r"\bp\.?\s?feathers?\b"]),
    ("Enchanted Sword", [r"\bench(anted)?\s+swords?\b", r"\be\.?\s?swords?\b"]),
    ("Void Crystal", [r"\bvoid\s+crystals?\b", r"\bvoid\s+gems?\b"]),
    ("Rare Mount Token", [r"\bmount\s+tokens?\b", r"\brmt\b"]),
    ("Rename Scroll", [r"\brename\s+scrolls?\b", r"\bname\s+change\s+scrolls?\b"]),
    ("XP Booster", [r"\bxp\s+boost(er)?s?\b", r"\bexp\s+boost(er)?s?\b"]),
    ("Premium Pass", [r"\bpremium\s+pass(es)?\b", r"\bbattle\s+pass(es)?\b"]),
    ("Gem Bundle", [r"\bgem\s+bundles?\b", r"\bgems?\s+pack\b"]),
]


class ItemCatalog:
    """
    Compiled, read-only item catalog.

    Patterns are compiled once when the catalog is built. A pattern that does
    not compile is a configuration error and aborts startup.
    """

    def __init__(self, entries: Iterable[tuple[str, Iterable[str]]]):
        self._entries: list[tuple[str, list[re.Pattern]]] = []

        for item_name, patterns in entries:
            compiled = []
            for pattern in patterns:
                try:
                    compiled.append(re.compile(pattern, re.IGNORECASE))
                except (re.error, TypeError) as e:
                    raise CatalogCompileError(
                        f"Pattern {pattern!r} for item '{item_name}' failed to compile: {e}",
                        item_name=item_name,
                        pattern=str(pattern),
                    )
            self._entries.append((item_name, compiled))

    @classmethod
    def builtin(cls) -> "ItemCatalog":
        """Catalog built from the packaged keyword table."""
        return cls(BUILTIN_ITEM_KEYWORDS)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, text: str) -> Optional[str]:
        """
        Find the item a message refers to.

        Items are tried in catalog order and each item's patterns in their
        own order; the first hit wins.

        Args:
            text: Lowercased message text

        Returns:
            Item name, or None if nothing matches
        """
        for item_name, patterns in self._entries:
            for pattern in patterns:
                if pattern.search(text):
                    return item_name
        return None


def _entries_from_yaml(data: Any, source: str) -> CatalogEntries:
    if isinstance(data, dict):
        items = data.get("items", data)
    else:
        items = data

    entries: CatalogEntries = []

    if isinstance(items, dict):
        for name, patterns in items.items():
            entries.append((str(name), _pattern_list(patterns, str(name), source)))
    elif isinstance(items, list):
        for entry in items:
            if not isinstance(entry, dict) or "name" not in entry:
                raise CatalogCompileError(
                    f"Catalog {source}: every list entry needs a 'name' and 'patterns'"
                )
            name = str(entry["name"])
            entries.append((name, _pattern_list(entry.get("patterns"), name, source)))
    else:
        raise CatalogCompileError(f"Catalog {source}: expected a mapping or a list of items")

    return entries


def _pattern_list(patterns: Any, item_name: str, source: str) -> list[str]:
    if isinstance(patterns, str):
        return [patterns]
    if not isinstance(patterns, list) or not patterns:
        raise CatalogCompileError(
            f"Catalog {source}: item '{item_name}' needs at least one pattern",
            item_name=item_name,
        )
    return [str(p) for p in patterns]


def load_catalog_file(path: Union[str, Path]) -> ItemCatalog:
    """
    Load a catalog from YAML.

    Either form is accepted, optionally nested under an ``items`` key::

        Dragon Egg: ['\\bdragon\\s+eggs?\\b']

        - name: Dragon Egg
          patterns: ['\\bdragon\\s+eggs?\\b']

    Raises:
        CatalogCompileError: If the file is unreadable, malformed, or a
            pattern does not compile
    """
    catalog_path = Path(path)
    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogCompileError(f"Could not load catalog '{catalog_path}': {e}")

    catalog = ItemCatalog(_entries_from_yaml(data, str(catalog_path)))
    logger.debug("Item catalog loaded", path=str(catalog_path), items=len(catalog))
    return catalog
