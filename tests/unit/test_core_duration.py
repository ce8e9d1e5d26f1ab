"""Unit tests for human-readable duration parsing."""

from datetime import timedelta

import pytest

from src.core.duration import parse_duration
from src.core.enums import ErrorCode
from src.core.result import Failure, Success


@pytest.mark.unit
class TestParseDuration:
    """Test parse_duration accepted and rejected forms."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("15m", timedelta(minutes=15)),
            ("15 minutes", timedelta(minutes=15)),
            ("1 minute", timedelta(minutes=1)),
            ("7d", timedelta(days=7)),
            ("7 days", timedelta(days=7)),
            ("12h", timedelta(hours=12)),
            ("1 hour", timedelta(hours=1)),
            ("30s", timedelta(seconds=30)),
            ("900", timedelta(seconds=900)),
            ("  2H  ", timedelta(hours=2)),
            ("3650d", timedelta(days=3650)),
        ],
    )
    def test_valid_durations(self, text, expected):
        assert parse_duration(text) == Success(value=expected)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "fortnight",
            "15 weeks",
            "-5m",
            "1.5h",
            "m15",
            "0s",
            "0",
            "3651d",
            "99999999999d",
            "9" * 40,
        ],
    )
    def test_invalid_durations_return_failure(self, text):
        result = parse_duration(text)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_DURATION
        assert repr(text) in result.error.message
