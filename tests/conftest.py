# pytest configuration

import pytest
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def captured_logs():
    """Capture the structured log events of a test instead of printing them."""
    with capture_logs() as logs:
        yield logs
