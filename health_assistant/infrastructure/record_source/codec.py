"""
Line codec for user records.

One record per line, comma separated, no header and no quoting:

    name,gender,age,weight,waist,neck,hip,height,lifestyle

hip is only written for female records with a measurement, and an empty hip
is read back as 0.0.
lifestyle takes the rest of the line. Only raw attributes are stored;
derived metrics are recomputed after loading.
"""

from typing import Callable, Optional, TypeVar

from health_assistant.domain.health_profile.core.entities.user_record import UserRecord
from health_assistant.domain.health_profile.core.exceptions.domain_errors import (
    MalformedRecordError,
)

FIELDS = (
    "name",
    "gender",
    "age",
    "weight",
    "waist",
    "neck",
    "hip",
    "height",
    "lifestyle",
)
SEPARATOR = ","

T = TypeVar("T")


def _convert(
    convert: Callable[[str], T],
    token: str,
    field: str,
    line: str,
    line_number: Optional[int],
) -> T:
    try:
        return convert(token.strip())
    except ValueError as exc:
        raise MalformedRecordError(line, field, token, line_number) from exc


def _format_number(value: float) -> str:
    """Integral values without decimals ("72"), others at full precision."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_record_line(line: str, line_number: Optional[int] = None) -> UserRecord:
    """
    Parse one serialized line into a record with raw attributes only.

    Args:
        line: Serialized record, line terminator optional
        line_number: 1-based position in the source, used in errors

    Returns:
        UserRecord with derived fields at their defaults

    Raises:
        MalformedRecordError: If a field is missing or not numeric

    Example:
        >>> parse_record_line("jane,female,23,61,68,36,70,170,moderate").hip
        70.0
    """
    line = line.rstrip("\r\n")
    tokens = line.split(SEPARATOR, len(FIELDS) - 1)
    if len(tokens) < len(FIELDS):
        missing = FIELDS[len(tokens)]
        raise MalformedRecordError(line, missing, "", line_number)

    name, gender, age, weight, waist, neck, hip, height, lifestyle = tokens

    return UserRecord(
        name=name,
        gender=gender,
        age=_convert(int, age, "age", line, line_number),
        weight=_convert(float, weight, "weight", line, line_number),
        waist=_convert(float, waist, "waist", line, line_number),
        neck=_convert(float, neck, "neck", line, line_number),
        hip=_convert(float, hip, "hip", line, line_number) if hip else 0.0,
        height=_convert(float, height, "height", line, line_number),
        lifestyle=lifestyle,
    )


def format_record_line(record: UserRecord) -> str:
    """
    Serialize the raw attributes of a record (no line terminator).

    Example:
        >>> format_record_line(parse_record_line("john,male,28,72,91,43,,172,sedentary"))
        'john,male,28,72,91,43,,172,sedentary'
    """
    hip = _format_number(record.hip) if record.is_female and record.hip else ""
    return SEPARATOR.join(
        [
            record.name,
            record.gender,
            str(record.age),
            _format_number(record.weight),
            _format_number(record.waist),
            _format_number(record.neck),
            hip,
            _format_number(record.height),
            record.lifestyle,
        ]
    )
