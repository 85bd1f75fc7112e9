"""Route Dependencies — catalog and settings injection for request handlers.

Invariants:
    - The catalog lives on app.state, set once by the lifespan
    - get_catalog raises CatalogUnavailableError (503) until it is set
"""

from fastapi import Request

from timeincity.core.city_catalog import CityCatalog
from timeincity.core.errors import CatalogUnavailableError


def get_catalog(request: Request) -> CityCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise CatalogUnavailableError()
    return catalog
