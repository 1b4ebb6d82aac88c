"""Unit tests for health profile value objects."""

import pytest

from health_assistant.domain.health_profile.core.value_objects import (
    BfpMethod,
    BodyFatResult,
    Gender,
    Lifestyle,
)


class TestGender:
    def test_parse_normalizes(self):
        assert Gender.parse("  FeMale ") is Gender.FEMALE
        assert Gender.parse("male") is Gender.MALE

    @pytest.mark.parametrize("text", [None, "", "other", "m"])
    def test_parse_unsupported(self, text):
        assert Gender.parse(text) is None

    def test_match_is_exact(self):
        assert Gender.match("female") is Gender.FEMALE
        assert Gender.match("Female") is None


class TestLifestyle:
    def test_parse_alias(self):
        assert Lifestyle.parse("Moderately") is Lifestyle.MODERATE

    def test_parse_unsupported(self):
        assert Lifestyle.parse("lazy") is None


class TestBfpMethod:
    def test_selector_values(self):
        assert BfpMethod("bmi") is BfpMethod.BMI
        assert BfpMethod("USArmy") is BfpMethod.US_NAVY

    def test_labels(self):
        assert BfpMethod.BMI.normal_label == "Bmi: Normal"
        assert BfpMethod.US_NAVY.normal_label == "USNavy: Normal"
        assert BfpMethod.US_NAVY.label("Very High") == "USNavy: Very High"

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("bmi", BfpMethod.BMI),
            ("BMI", BfpMethod.BMI),
            ("usarmy", BfpMethod.US_NAVY),
            (BfpMethod.US_NAVY, BfpMethod.US_NAVY),
            ("all", None),
            (None, None),
            ("skinfold", None),
        ],
    )
    def test_parse(self, selector, expected):
        assert BfpMethod.parse(selector) is expected


class TestBodyFatResult:
    def test_classified(self):
        assert BodyFatResult(percent=12, category="Bmi: Normal").is_classified
        assert not BodyFatResult(percent=12).is_classified
