from datetime import UTC, datetime
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator


class PersonalInfo(BaseModel):
    name: str
    location: str
    phone_number: str
    email: str
    links: dict[str, str] = {}


class Experience(BaseModel):
    id: str
    title: str
    employer: str | None = None
    start_date: AwareDatetime
    end_date: AwareDatetime | None = None
    projects: list[str] = []

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _require_timestamp_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            raise ValueError("expected an RFC 3339 timestamp, not a number")
        return value

    @field_validator("start_date", "end_date")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return value.astimezone(UTC) if value is not None else None


class Project(BaseModel):
    id: str
    title: str
    duration: str | None = None
    description: str
    skills: list[str] = []


class Skill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    skill_type: str = Field(..., alias="type")
    category: str


class Resume(BaseModel):
    info: PersonalInfo
    experiences: list[Experience] = []
    projects: list[Project] = []
    skills: list[Skill] = []


class ResumeConfig(BaseModel):
    """Root object of the on-disk document."""

    resume: Resume
