"""
Eligibility Engine Constants

Defines the age bands, priority keyword table, vocabularies and limits used by
the eligibility engine, the selection tracker and the wizard.
All values are static; nothing here is read from configuration.
"""

from enum import Enum
from typing import Dict, List


# =============================================================================
# CLOSED VOCABULARIES
# =============================================================================

class SchoolCategory(str, Enum):
    """School type tag. Display only, no behaviour hangs off it."""
    PUBLIC = "public"
    PRIVATE = "private"
    INDEPENDENT = "independent"
    RELIGIOUS = "religious"
    MINI_SCHOOL = "mini_school"
    IB_PROGRAM = "ib_program"
    MONTESSORI = "montessori"
    ALTERNATIVE = "alternative"
    CHARTER = "charter"


class LevelBand(str, Enum):
    """Coarse grade span a school serves. Used for age eligibility."""
    PRESCHOOL = "preschool"
    ELEMENTARY = "elementary"
    MIDDLE = "middle"
    HIGH = "high"
    ALL_AGES = "all_ages"


class Competitiveness(str, Enum):
    """Ordinal admissions competitiveness rating."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"
    EXTREMELY_HIGH = "extremely_high"


CATEGORY_LABELS: Dict[str, str] = {
    SchoolCategory.PUBLIC: "Public",
    SchoolCategory.PRIVATE: "Private",
    SchoolCategory.INDEPENDENT: "Independent",
    SchoolCategory.RELIGIOUS: "Religious",
    SchoolCategory.MINI_SCHOOL: "Mini School",
    SchoolCategory.IB_PROGRAM: "IB Program",
    SchoolCategory.MONTESSORI: "Montessori",
    SchoolCategory.ALTERNATIVE: "Alternative",
    SchoolCategory.CHARTER: "Charter",
}

COMPETITIVENESS_LABELS: Dict[str, str] = {
    Competitiveness.LOW: "Low",
    Competitiveness.MODERATE: "Moderate",
    Competitiveness.HIGH: "High",
    Competitiveness.VERY_HIGH: "Very High",
    Competitiveness.EXTREMELY_HIGH: "Extremely High",
}

# Older catalog revisions used "k12" for schools spanning every grade
LEVEL_BAND_ALIASES: Dict[str, str] = {
    "k12": LevelBand.ALL_AGES.value,
    "k-12": LevelBand.ALL_AGES.value,
    "all-ages": LevelBand.ALL_AGES.value,
}

# =============================================================================
# AGE BANDS
# =============================================================================

MIN_CHILD_AGE = 2
MAX_CHILD_AGE = 18
DEFAULT_CHILD_AGE = 5

# Upper age bound (inclusive) -> admissible level bands.
# Cut points 6/7, 11/12 and 14/15 are fixed.
AGE_LEVEL_BANDS: List[tuple] = [
    (6, (LevelBand.PRESCHOOL, LevelBand.ELEMENTARY, LevelBand.ALL_AGES)),
    (11, (LevelBand.ELEMENTARY, LevelBand.ALL_AGES)),
    (14, (LevelBand.MIDDLE, LevelBand.HIGH, LevelBand.ALL_AGES)),
    (MAX_CHILD_AGE, (LevelBand.HIGH, LevelBand.ALL_AGES)),
]

# Age from which the plan reminds families to register for admissions tests
ADMISSIONS_TEST_AGE = 12

# =============================================================================
# LOCATION & BUDGET
# =============================================================================

FLEXIBLE_LOCATION = "Flexible"
DEFAULT_LOCATION = "Vancouver"
LOCATION_OPTIONS = ["Vancouver", "Burnaby", "Richmond", FLEXIBLE_LOCATION]

# 0 means "public/free options only", not "no budget"
PUBLIC_ONLY_BUDGET = 0
MAX_BUDGET = 50000
BUDGET_STEP = 2500

FREE_TUITION_LABEL = "Free"

# =============================================================================
# PRIORITIES
# =============================================================================

PRIORITY_OPTIONS: List[str] = [
    "Academic Excellence",
    "Arts & Creativity",
    "Small Class Sizes",
    "Language Learning",
    "Gifted Programs",
    "Technology Focus",
    "Outdoor Education",
    "Strong Community",
]

# Priority tag -> lowercase keywords searched in a school's descriptive text.
# Tags missing from this table match on their own lowercased text.
PRIORITY_KEYWORDS: Dict[str, List[str]] = {
    "Academic Excellence": ["academic", "excellence", "gifted"],
    "Arts & Creativity": ["arts", "drama", "music", "creative"],
    "Small Class Sizes": ["small class", "small"],
    "Language Learning": ["language", "french", "mandarin", "bilingual", "immersion"],
    "Gifted Programs": ["gifted"],
    "Technology Focus": ["stem", "science", "technology"],
    "Outdoor Education": ["outdoor", "nature", "environment"],
    "Strong Community": ["community", "values", "character"],
}

# =============================================================================
# SELECTION
# =============================================================================

MAX_SELECTED_SCHOOLS = 5

# =============================================================================
# ELIGIBILITY CHECKS
# =============================================================================

CHECK_LEVEL = "level"
CHECK_LOCATION = "location"
CHECK_BUDGET = "budget"
CHECK_PRIORITIES = "priorities"

ELIGIBILITY_CHECKS = [CHECK_LEVEL, CHECK_LOCATION, CHECK_BUDGET, CHECK_PRIORITIES]

ENGINE_VERSION = "1.0.0"
