"""Restaurant record sources used for indexing."""

from RestaurantSearch.storage.records import load_records

__all__ = ["load_records"]
