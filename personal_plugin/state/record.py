from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class PersonalRecord(BaseModel):
    """The persisted name/preferences document.

    ``name`` is empty when unset and otherwise trimmed. Preference keys are
    unique by construction.
    """

    name: str = ""
    preferences: dict[str, str] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _trim_name(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("preferences", mode="before")
    @classmethod
    def _default_preferences(cls, value: object) -> object:
        return {} if value is None else value

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)
