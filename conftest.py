"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_email_relay_env(monkeypatch):
    """Hide any real EMAILJS_* credentials so tests never depend on a local .env."""
    for name in (
        "EMAILJS_SERVICE_ID",
        "EMAILJS_TEMPLATE_ID",
        "EMAILJS_PUBLIC_KEY",
        "EMAILJS_FROM_NAME",
        "EMAILJS_FROM_EMAIL",
        "EMAILJS_REPLY_TO",
        "EMAILJS_BCC",
        "EMAILJS_CC",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
