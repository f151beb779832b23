"""
Catalog Loader

Validates raw school records into an immutable Catalog.

This is a pure READ + VALIDATE layer:
- NO filtering logic
- NO selection state
- fails fast on the first malformed record
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from ..errors import CatalogValidationError
from ..logic.constants import LEVEL_BAND_ALIASES
from ..logic.contracts import SchoolRecord

logger = logging.getLogger(__name__)


class Catalog:
    """
    Ordered, read-only collection of SchoolRecord keyed by id.
    Iteration follows catalog order.
    """

    def __init__(self, records: Iterable[SchoolRecord]):
        self._records: Tuple[SchoolRecord, ...] = tuple(records)
        self._by_id: Dict[str, SchoolRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise CatalogValidationError("duplicate school id", school_id=record.id)
            self._by_id[record.id] = record

    @property
    def records(self) -> Tuple[SchoolRecord, ...]:
        return self._records

    def __iter__(self) -> Iterator[SchoolRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, school_id: object) -> bool:
        return school_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} schools)"

    def get(self, school_id: str) -> Optional[SchoolRecord]:
        return self._by_id.get(school_id)

    def resolve(self, school_ids: Iterable[str]) -> List[SchoolRecord]:
        """Look up ids in the given order, skipping any the catalog does not hold."""
        return [self._by_id[sid] for sid in school_ids if sid in self._by_id]


def _normalize_level_band(value: Any) -> Any:
    if isinstance(value, str):
        key = value.strip().lower()
        return LEVEL_BAND_ALIASES.get(key, key)
    return value


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ())) or "record"
        parts.append(f"{field}: {error.get('msg')}")
    return "; ".join(parts)


def parse_record(raw: Dict[str, Any], index: int = 0) -> SchoolRecord:
    """
    Validate one raw record.

    Args:
        raw: Raw record dict (see catalog.data)
        index: Position in the source list, used in error messages

    Returns:
        Validated SchoolRecord

    Raises:
        CatalogValidationError: naming the record id (or index) and the problem
    """
    if not isinstance(raw, dict):
        raise CatalogValidationError(
            f"record #{index} must be a mapping (got {type(raw).__name__})"
        )

    school_id = raw.get("id") or f"#{index}"
    data = dict(raw)
    if "level_band" in data:
        data["level_band"] = _normalize_level_band(data["level_band"])

    try:
        return SchoolRecord(**data)
    except ValidationError as e:
        raise CatalogValidationError(_describe_errors(e), school_id=school_id) from e


def load_catalog(raw_records: Optional[Iterable[Dict[str, Any]]] = None) -> Catalog:
    """
    Build a Catalog from raw records.

    Args:
        raw_records: Raw record dicts. Defaults to the shipped SCHOOL_DATA.

    Returns:
        Catalog in source order

    Raises:
        CatalogValidationError: on the first malformed record or duplicate id
    """
    if raw_records is None:
        from .data import SCHOOL_DATA
        raw_records = SCHOOL_DATA

    records = [parse_record(raw, index) for index, raw in enumerate(raw_records)]
    catalog = Catalog(records)

    logger.info(f"📚 Catalog loaded: {len(catalog)} schools")
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Shipped catalog, loaded once per process."""
    return load_catalog()
