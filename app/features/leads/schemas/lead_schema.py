from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.features.leads.utils.validation import (
    ERROR_MESSAGES,
    is_present,
    is_valid_age_range,
    is_valid_email,
)
from app.platform.schemas import APIResponse


class LeadCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", description="Visitor first name")
    last_name: str = Field(..., alias="lastName", description="Visitor last name")
    email: str = Field(..., description="Visitor email")
    age_range: str = Field(..., alias="ageRange", description="One of the age bracket labels")

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not is_present(value):
            raise ValueError(ERROR_MESSAGES["firstName"])
        return value.strip()

    @field_validator("email")
    @classmethod
    def email_matches_pattern(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError(ERROR_MESSAGES["email"])
        return value

    @field_validator("age_range")
    @classmethod
    def age_range_is_known(cls, value: str) -> str:
        if not is_valid_age_range(value):
            raise ValueError(ERROR_MESSAGES["ageRange"])
        return value


class LeadOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    age_range: str


class RegistrationOut(BaseModel):
    lead: LeadOut
    download_url: str


class RegistrationResponse(APIResponse[RegistrationOut]):
    pass
