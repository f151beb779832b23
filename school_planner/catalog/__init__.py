"""
School Catalog Module

Static Vancouver-area school dataset and its validating loader.
"""

from .loader import Catalog, get_catalog, load_catalog, parse_record
from .queries import (
    by_category,
    by_competitiveness,
    by_level,
    private_schools,
    public_choice_programs,
    requiring_ssat,
    with_financial_aid,
)

__all__ = [
    # Loader
    "Catalog",
    "get_catalog",
    "load_catalog",
    "parse_record",

    # Queries
    "by_category",
    "by_competitiveness",
    "by_level",
    "private_schools",
    "public_choice_programs",
    "requiring_ssat",
    "with_financial_aid",
]
