"""Domain models for catalog entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from daybreak.domain.enums import ActionTag


class RoomObject(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(min_length=1)
    name: str
    action: ActionTag
    marker: str = ""
