"""Test configuration and fixtures for safeql."""
import logging

import pytest


@pytest.fixture
def debug_logs(caplog):
    """Capture safeql DEBUG records (default substitution, type construction)."""
    caplog.set_level(logging.DEBUG, logger="safeql")
    return caplog
