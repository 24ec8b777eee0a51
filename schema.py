from enum import Enum

from pydantic import BaseModel, field_validator


class FillMode(str, Enum):
    MILESTONE = "milestone"
    RANDOM = "random"


class BadgeQuery(BaseModel):
    # [Requirement] ?fill_mode= is optional and defaults to milestone
    fill_mode: FillMode = FillMode.MILESTONE

    @field_validator("fill_mode", mode="before")
    @classmethod
    def lowercase_mode(cls, value):
        # "Random", "RANDOM" and "random" are the same mode
        if value is None:
            return FillMode.MILESTONE
        if isinstance(value, str):
            return value.strip().lower()
        return value
