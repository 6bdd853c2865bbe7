"""관할 Pydantic 스키마 정의.

Jurisdiction reference-data schemas.
"""

from typing import Literal

from pydantic import BaseModel, Field

from lexiflow.schemas.common import ORMResponse

JurisdictionType = Literal["Federal", "State", "International", "Local"]


class JurisdictionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=50)
    jurisdiction_type: JurisdictionType = "State"
    parent_code: str | None = None
    court_level: str | None = None


class JurisdictionUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    jurisdiction_type: JurisdictionType | None = None
    parent_code: str | None = None
    court_level: str | None = None


class JurisdictionResponse(ORMResponse):
    name: str
    code: str
    jurisdiction_type: str
    parent_code: str | None
    court_level: str | None
