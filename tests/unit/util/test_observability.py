"""Unit tests for observability settings."""

import pytest

from senatus.config import ObservabilitySettings
from senatus.util.observability import should_send_to_logfire


@pytest.mark.parametrize(
    ("settings", "expected"),
    [
        (ObservabilitySettings(), False),
        (ObservabilitySettings(logfire_token="token"), True),
        (ObservabilitySettings(logfire_token="token", send_to_logfire=False), False),
        (ObservabilitySettings(send_to_logfire=True), True),
    ],
)
def test_should_send_to_logfire(settings, expected):
    assert should_send_to_logfire(settings) is expected
