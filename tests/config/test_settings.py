"""Tests for validate_params.config.settings: Settings Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from validate_params.config.settings import ValidationOptions, ValidatorSettings


class TestValidationOptions:
    def test_defaults(self) -> None:
        opts = ValidationOptions()
        assert opts.format == "grouped"
        assert opts.full_messages is True
        assert opts.fatal is False
        assert opts.check_formats is False

    def test_camel_case_aliases(self) -> None:
        opts = ValidationOptions.model_validate({"fullMessages": False, "checkFormats": True})
        assert opts.full_messages is False
        assert opts.check_formats is True

    def test_unknown_fields_ignored(self) -> None:
        opts = ValidationOptions.model_validate({"cleanAttributes": True, "fatal": True})
        assert opts.fatal is True

    def test_invalid_format_raises(self) -> None:
        with pytest.raises(ValidationError):
            ValidationOptions.model_validate({"format": "sideways"})

    def test_frozen(self) -> None:
        opts = ValidationOptions()
        with pytest.raises(ValidationError):
            opts.fatal = True  # type: ignore[misc]

    def test_fields_set_tracks_explicit_values(self) -> None:
        opts = ValidationOptions.model_validate({"fullMessages": False})
        assert opts.model_fields_set == {"full_messages"}


class TestValidatorSettings:
    def test_defaults(self) -> None:
        s = ValidatorSettings()
        assert isinstance(s.options, ValidationOptions)
        assert s.draft == "2020-12"

    def test_from_dict(self) -> None:
        s = ValidatorSettings.model_validate({"options": {"format": "flat"}, "draft": "7"})
        assert s.options.format == "flat"
        assert s.draft == "7"

    def test_integer_draft_accepted(self) -> None:
        assert ValidatorSettings.model_validate({"draft": 4}).draft == "4"

    def test_unknown_draft_raises(self) -> None:
        with pytest.raises(ValidationError):
            ValidatorSettings.model_validate({"draft": "3"})

    def test_unknown_fields_ignored(self) -> None:
        s = ValidatorSettings.model_validate({"unknown_field": "value", "draft": "6"})
        assert s.draft == "6"
