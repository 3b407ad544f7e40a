"""Competition schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CompetitionCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    legacy_id: int = Field(..., ge=1)
    slug: str = Field(..., min_length=1, max_length=120)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: str | None = Field(default=None, max_length=100)
    prize: str | None = Field(default=None, max_length=200)
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    is_published: bool = False


class CompetitionUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    slug: str | None = Field(default=None, min_length=1, max_length=120)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    category: str | None = Field(default=None, max_length=100)
    prize: str | None = Field(default=None, max_length=200)
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    is_published: bool | None = None


class CompetitionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    legacy_id: int
    slug: str
    title: str
    description: str
    category: str | None
    prize: str | None
    starts_at: datetime | None
    ends_at: datetime | None
    is_published: bool
    created_at: datetime | None
    updated_at: datetime | None
