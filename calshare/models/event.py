"""Share event model with Pydantic v2 validation."""

from typing import Optional, Union

from pydantic import BaseModel, computed_field, field_validator


class ShareEvent(BaseModel):
    """A single event to be shared to a calendar.

    Datetimes are kept as the caller supplied them (ISO-8601 style strings,
    usually with an explicit UTC offset) and are only parsed where a
    timezone window has to be computed.
    """

    title: str = ""
    description: str = ""
    location: str = ""
    start_datetime: str
    end_datetime: str
    timezone: str = ""
    duration: Optional[Union[str, float, int]] = None

    @field_validator("title", "description", "location", "timezone", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat missing free-text fields as empty strings."""
        if v is None:
            return ""
        return v

    @field_validator("timezone")
    @classmethod
    def strip_timezone(cls, v: str) -> str:
        """Strip surrounding whitespace from the timezone identifier."""
        return v.strip()

    @computed_field
    @property
    def is_floating(self) -> bool:
        """True if the event carries no timezone."""
        return self.timezone == ""
