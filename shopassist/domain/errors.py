"""
Domain errors.

Only EmptyCatalogError is meant to escape the domain layer (startup
precondition). The others are raised by adapters/helpers and caught by the
code that called them.
"""


class PriceParseError(ValueError):
    """A currency string could not be turned into a number."""


class CatalogCacheError(RuntimeError):
    """Reading, writing or decoding the catalog cache failed."""


class CatalogNotLoadedError(RuntimeError):
    """The product store was read before load() completed."""


class EmptyCatalogError(RuntimeError):
    """The seed dataset is empty, so the store can never be populated."""
