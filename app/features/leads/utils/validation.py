import re
from enum import Enum
from typing import Dict, Mapping, Optional

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

FORM_FIELDS = ("firstName", "lastName", "email", "ageRange")


class AgeRange(str, Enum):
    # Labels are shown as-is; neighbouring brackets share their edge ages
    UNDER_15 = "-15"
    FROM_15_TO_20 = "15-20"
    FROM_20_TO_25 = "20-25"
    FROM_25_TO_30 = "25-30"
    FROM_30_TO_40 = "30-40"
    FROM_40_TO_50 = "40-50"
    FROM_50_TO_60 = "50-60"
    FROM_60_TO_65 = "60-65"
    OVER_65 = "65+"


AGE_RANGES = [age.value for age in AgeRange]

ERROR_MESSAGES = {
    "firstName": "Required field",
    "lastName": "Required field",
    "email": "Valid email required",
    "ageRange": "Please select an age range",
}


def is_present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def is_valid_email(value: Optional[str]) -> bool:
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_age_range(value: Optional[str]) -> bool:
    return value in AGE_RANGES


def validate_lead_form(data: Mapping[str, Optional[str]]) -> Dict[str, bool]:
    """
    Check every form field at once.

    Returns a mapping of field name -> True when that field is invalid, so the
    caller can flag each failing input individually.
    """
    return {
        "firstName": not is_present(data.get("firstName")),
        "lastName": not is_present(data.get("lastName")),
        "email": not is_valid_email(data.get("email")),
        "ageRange": not is_valid_age_range(data.get("ageRange")),
    }
