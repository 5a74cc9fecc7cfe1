"""Item keyword catalog used to recognise tradable items in chat text."""

from .items import BUILTIN_ITEM_KEYWORDS, ItemCatalog, load_catalog_file

__all__ = ["BUILTIN_ITEM_KEYWORDS", "ItemCatalog", "load_catalog_file"]
