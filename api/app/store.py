"""Process-wide curve catalog, loaded once from CURVE_CATALOG_PATH or the bundled file."""

import logging
import os
from typing import Optional

from ratecurves.catalog import CurveCatalog, load_catalog

logger = logging.getLogger(__name__)

_catalog: Optional[CurveCatalog] = None


def get_catalog() -> CurveCatalog:
    """Return shared catalog; load it on first use."""
    global _catalog
    if _catalog is None:
        path = os.environ.get("CURVE_CATALOG_PATH")
        _catalog = load_catalog(path or None)
        logger.info("curve catalog ready: %s", ", ".join(_catalog.names()))
    return _catalog


def set_catalog(catalog: Optional[CurveCatalog]) -> None:
    """Replace the shared catalog (None forces a reload on next use)."""
    global _catalog
    _catalog = catalog
