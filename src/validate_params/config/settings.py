"""Settings Pydantic models for validate_params configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator

JsonSchemaDraft = Literal["4", "6", "7", "2019-09", "2020-12"]


class ValidationOptions(BaseModel):
    """Per-call options accepted as the third argument of ``validate_params``."""

    format: Literal["grouped", "flat", "detailed"] = "grouped"
    full_messages: bool = Field(
        default=True,
        validation_alias=AliasChoices("full_messages", "fullMessages"),
    )
    fatal: bool = False
    check_formats: bool = Field(
        default=False,
        validation_alias=AliasChoices("check_formats", "checkFormats"),
    )

    model_config = {"extra": "ignore", "frozen": True}


class ValidatorSettings(BaseModel):
    """Top-level settings: default options plus the JSON Schema dialect."""

    options: ValidationOptions = Field(default_factory=ValidationOptions)
    draft: JsonSchemaDraft = "2020-12"

    model_config = {"extra": "ignore"}

    @field_validator("draft", mode="before")
    @classmethod
    def _draft_as_text(cls, value: object) -> object:
        # YAML reads ``draft: 7`` as an int
        return str(value) if isinstance(value, int) else value
