"""Solutions to classic programming-contest exercises as reusable functions."""

__version__ = "0.1.0"

__all__ = [
    "bank",
    "billing",
    "catalog",
    "connectivity",
    "gas_station",
    "linked",
    "numbers",
    "polynomials",
    "ranking",
    "roster",
    "sequences",
    "shortest_paths",
    "strings",
    "table_tennis",
    "trees",
]