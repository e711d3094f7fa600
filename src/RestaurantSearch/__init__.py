"""RestaurantSearch: compose and run full-text restaurant searches."""

__version__ = "0.1.0"
