"""Shared test fixtures."""

from __future__ import annotations

from typing import Callable

import pytest
import structlog

from health_assistant.domain.health_profile.core.entities.user_record import UserRecord


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_record() -> Callable[..., UserRecord]:
    """Factory building a valid male record, overridable per field."""

    def _make(**overrides) -> UserRecord:
        values = dict(
            name="john",
            gender="male",
            age=30,
            weight=70.0,
            height=175.0,
            waist=80.0,
            neck=38.0,
            hip=0.0,
            lifestyle="moderate",
        )
        values.update(overrides)
        return UserRecord(**values)

    return _make
