from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def admin_caller():
    """Admin API caller stand-in; configure return_value or side_effect per test."""
    return AsyncMock()
