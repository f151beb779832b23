"""
Data Contracts for the Eligibility Engine

Defines Pydantic models for SchoolRecord and FamilyProfile (inputs) and
EligibilityVerdict / DiscoveryOutput (outputs).
These contracts are the boundary between the engine, the wizard and the report.
"""

import math
from typing import Annotated, Any, Dict, FrozenSet, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from ..errors import CatalogValidationError
from .constants import (
    DEFAULT_CHILD_AGE,
    DEFAULT_LOCATION,
    ENGINE_VERSION,
    FREE_TUITION_LABEL,
    Competitiveness,
    LevelBand,
    SchoolCategory,
)


# =============================================================================
# TUITION
# =============================================================================

class NumericTuition(BaseModel):
    """A known annual amount. $0 is still numeric, not free."""
    kind: Literal["numeric"] = "numeric"
    amount: int = Field(ge=0)

    class Config:
        frozen = True

    def display(self) -> str:
        return f"${self.amount:,}/yr"


class FreeTuition(BaseModel):
    """No cost (public programs)."""
    kind: Literal["free"] = "free"

    class Config:
        frozen = True

    def display(self) -> str:
        return FREE_TUITION_LABEL


class VariableTuition(BaseModel):
    """Institution-specific amount that cannot be compared numerically."""
    kind: Literal["variable"] = "variable"
    text: str = Field(min_length=1)

    class Config:
        frozen = True

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("variable tuition text must not be blank")
        return value.strip()

    def display(self) -> str:
        return self.text


Tuition = Annotated[
    Union[NumericTuition, FreeTuition, VariableTuition],
    Field(discriminator="kind"),
]


def parse_tuition(raw: Any) -> Union[NumericTuition, FreeTuition, VariableTuition]:
    """
    Resolve a raw catalog tuition value into a Tuition variant.

    - non-negative whole numbers -> NumericTuition
    - the string "Free" (any case) -> FreeTuition
    - any other non-blank string -> VariableTuition

    Raises:
        CatalogValidationError: for anything that does not resolve cleanly
    """
    if isinstance(raw, (NumericTuition, FreeTuition, VariableTuition)):
        return raw

    # bool is an int subclass; True/False is never a tuition
    if isinstance(raw, bool):
        raise CatalogValidationError(f"tuition must not be a boolean (got {raw!r})")

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and (not math.isfinite(raw) or not raw.is_integer()):
            raise CatalogValidationError(f"tuition must be a whole amount (got {raw!r})")
        if raw < 0:
            raise CatalogValidationError(f"tuition must not be negative (got {raw!r})")
        return NumericTuition(amount=int(raw))

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise CatalogValidationError("tuition text must not be blank")
        if text.lower() == FREE_TUITION_LABEL.lower():
            return FreeTuition()
        return VariableTuition(text=text)

    raise CatalogValidationError(
        f"tuition must be a number or text (got {type(raw).__name__})"
    )


# =============================================================================
# CATALOG RECORD
# =============================================================================

class SchoolRecord(BaseModel):
    """
    One school in the catalog.
    Created once at catalog load and never mutated.
    """
    id: str = Field(min_length=1)
    name: str
    category: SchoolCategory
    level_band: LevelBand
    grade_range: str = ""  # display only, never filtered on
    location: str
    tuition: Tuition
    specialty_tags: Tuple[str, ...] = ()
    feature_tags: Tuple[str, ...] = ()
    description: str = ""
    competitiveness: Competitiveness = Competitiveness.MODERATE
    application_deadline: str = ""

    # Optional details from the source dataset
    website: Optional[str] = None
    tour_dates: Optional[str] = None
    financial_aid: Optional[bool] = None
    ssat_required: Optional[bool] = None

    class Config:
        frozen = True

    @field_validator("tuition", mode="before")
    @classmethod
    def _parse_tuition(cls, value: Any) -> Any:
        # Serialized variants ({"kind": ...}) go straight to the discriminator
        if isinstance(value, dict):
            return value
        return parse_tuition(value)

    @property
    def descriptive_text(self) -> str:
        """Lowercased specialty, feature and description text for keyword matching."""
        return " ".join(
            list(self.specialty_tags) + list(self.feature_tags) + [self.description]
        ).lower()


# =============================================================================
# FAMILY PROFILE
# =============================================================================

class FamilyProfile(BaseModel):
    """
    Input contract for the eligibility engine.
    Owned by the wizard, which replaces it on every update.
    """
    child_age: int = DEFAULT_CHILD_AGE
    location_preference: str = DEFAULT_LOCATION  # "Flexible" = no constraint
    budget_ceiling: int = Field(default=0, ge=0)  # 0 = public/free only
    priority_tags: FrozenSet[str] = frozenset()

    # Report personalisation
    parent_name: Optional[str] = None
    child_name: Optional[str] = None

    class Config:
        frozen = True


# Ordered, distinct school ids; at most MAX_SELECTED_SCHOOLS long
Selection = Tuple[str, ...]


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class EligibilityVerdict(BaseModel):
    """Outcome of every eligibility check for one school."""
    school_id: str
    checks: Dict[str, bool] = Field(default_factory=dict)

    @property
    def eligible(self) -> bool:
        return all(self.checks.values())

    @property
    def failed_checks(self) -> List[str]:
        return [name for name, passed in self.checks.items() if not passed]


class DiscoveryOutput(BaseModel):
    """
    Output contract for the eligibility engine.
    Eligible schools in catalog order plus summary statistics.
    """
    schools: List[SchoolRecord] = Field(default_factory=list)

    # Summary Statistics
    total_evaluated: int = 0
    total_eligible: int = 0
    rejections: Dict[str, int] = Field(default_factory=dict)  # check -> failures

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)

    @property
    def school_ids(self) -> List[str]:
        return [school.id for school in self.schools]
