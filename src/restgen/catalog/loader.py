from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from restgen.domain.models import Catalog, EndpointDescriptor
from restgen.errors import CatalogError

logger = logging.getLogger(__name__)


def parse_catalog(records: object) -> Catalog:
    """
    Validate raw catalog records into an immutable Catalog.

    Record order is preserved; the route builder depends on it.
    """
    if not isinstance(records, list):
        raise CatalogError(f"Catalog must be a JSON array, got {type(records).__name__}")

    out: list[EndpointDescriptor] = []
    for idx, rec in enumerate(records):
        try:
            out.append(EndpointDescriptor.model_validate(rec))
        except ValidationError as e:
            raise CatalogError(f"Invalid endpoint record at index {idx}: {e}") from e
    return tuple(out)


def load_catalog(path: Path) -> Catalog:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    catalog = parse_catalog(records)
    logger.debug("Loaded %d endpoint descriptors from %s", len(catalog), path)
    return catalog
