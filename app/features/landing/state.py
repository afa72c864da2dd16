"""
Landing form state.

Each field moves EMPTY -> INVALID -> VALID as it is edited and checked, and
the form as a whole moves IDLE -> SUBMITTING -> SUCCESS | ERROR. Editing any
field drops that field's error and returns the form to IDLE, so a banner or
inline error from an earlier attempt never outlives the input it was about.
"""
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from app.features.leads.utils.validation import ERROR_MESSAGES, FORM_FIELDS, validate_lead_form


class FieldStatus(str, Enum):
    EMPTY = "empty"
    INVALID = "invalid"
    VALID = "valid"


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


def _blank_fields() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


class LandingFormState(BaseModel):
    values: Dict[str, str] = Field(default_factory=_blank_fields)
    field_status: Dict[str, FieldStatus] = Field(
        default_factory=lambda: {name: FieldStatus.EMPTY for name in FORM_FIELDS}
    )
    status: SubmitStatus = SubmitStatus.IDLE
    message: str = ""
    download_url: Optional[str] = None

    @classmethod
    def from_form(cls, data) -> "LandingFormState":
        state = cls()
        for name in FORM_FIELDS:
            state.edit(name, data.get(name) or "")
        return state

    def edit(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(name)
        self.values[name] = value
        self.field_status[name] = FieldStatus.EMPTY if not value.strip() else FieldStatus.VALID
        self.status = SubmitStatus.IDLE
        self.message = ""
        self.download_url = None

    def validate(self) -> bool:
        errors = validate_lead_form(self.values)
        for name, failed in errors.items():
            self.field_status[name] = FieldStatus.INVALID if failed else FieldStatus.VALID
        return not any(errors.values())

    def begin_submit(self) -> None:
        self.status = SubmitStatus.SUBMITTING
        self.message = ""
        self.download_url = None

    def succeed(self, message: str, download_url: str) -> None:
        self.values = _blank_fields()
        self.field_status = {name: FieldStatus.EMPTY for name in FORM_FIELDS}
        self.status = SubmitStatus.SUCCESS
        self.message = message
        self.download_url = download_url

    def fail(self, message: str) -> None:
        self.status = SubmitStatus.ERROR
        self.message = message
        self.download_url = None

    @property
    def errors(self) -> Dict[str, str]:
        return {
            name: ERROR_MESSAGES[name]
            for name, field_status in self.field_status.items()
            if field_status == FieldStatus.INVALID
        }
