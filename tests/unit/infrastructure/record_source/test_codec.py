"""Unit tests for the record line codec."""

import pytest

from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    MalformedRecordError,
)
from health_assistant.infrastructure.record_source.codec import (
    format_record_line,
    parse_record_line,
)


class TestParseRecordLine:
    def test_male_line_with_empty_hip(self):
        record = parse_record_line("john,male,28,72,91,43,,172,sedentary")

        assert record.name == "john"
        assert record.gender == "male"
        assert record.age == 28
        assert record.weight == 72.0
        assert record.waist == 91.0
        assert record.neck == 43.0
        assert record.hip == 0.0
        assert record.height == 172.0
        assert record.lifestyle == "sedentary"

    def test_female_line_with_hip(self):
        record = parse_record_line("jane,female,23,61,68,36,70.5,170,moderate")

        assert record.hip == 70.5

    def test_only_raw_fields_are_set(self):
        record = parse_record_line("john,male,28,72,91,43,,172,sedentary")

        assert record.body_fat_category is None
        assert record.body_fat_percent == 0
        assert record.daily_calories == 0

    def test_lifestyle_takes_rest_of_line(self):
        record = parse_record_line("john,male,28,72,91,43,,172,active, mostly")

        assert record.lifestyle == "active, mostly"

    def test_line_terminator_is_stripped(self):
        record = parse_record_line("john,male,28,72,91,43,,172,active\r\n")

        assert record.lifestyle == "active"

    def test_non_numeric_field(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_record_line("john,male,abc,72,91,43,,172,sedentary", line_number=3)

        error = exc_info.value
        assert error.field == "age"
        assert error.value == "abc"
        assert error.line_number == 3
        assert "line 3" in str(error)

    def test_non_numeric_hip(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_record_line("jane,female,23,61,68,36,wide,170,moderate")

        assert exc_info.value.field == "hip"

    @pytest.mark.parametrize(
        "line, field",
        [
            ("john,male,28,72", "waist"),
            ("john,male,28,72,91", "neck"),
            ("john,male,28,72,91,43,,172", "lifestyle"),
        ],
    )
    def test_missing_fields(self, line, field):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_record_line(line)

        assert exc_info.value.field == field

    def test_blank_line_is_malformed(self):
        with pytest.raises(MalformedRecordError):
            parse_record_line("")


class TestFormatRecordLine:
    @pytest.mark.parametrize(
        "line",
        [
            "john,male,28,72,91,43,,172,sedentary",
            "jane,female,23,61,68,36,70,170,moderate",
            "jane,female,23,61,68,36,,170,moderate",
            "anna,female,45,58.5,66.25,31.1,92.7,160.5,active",
            "Mixed Case,male,60,80.125,100,41,,181,moderate",
        ],
    )
    def test_round_trip(self, line):
        assert format_record_line(parse_record_line(line)) == line

    def test_hip_only_written_for_females(self, make_record):
        record = make_record(hip=99.0)

        assert format_record_line(record) == "john,male,30,70,80,38,,175,moderate"

    def test_derived_fields_not_written(self, make_record):
        record = make_record()
        record.daily_calories = 2800
        record.body_fat_category = "Bmi: Normal"

        assert "2800" not in format_record_line(record)
        assert "Normal" not in format_record_line(record)
