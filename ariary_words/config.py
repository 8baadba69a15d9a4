"""
Runtime configuration read from the environment.

Only the e-mail relay needs settings. Values come from process environment
variables; `api.py` and `main.py` call `load_dotenv()` first so a local
`.env` file works too.
"""

from __future__ import annotations

import os

from pydantic import BaseModel

# Values shipped in the sample configuration — treated as "not configured"
PLACEHOLDER_VALUES: frozenset[str] = frozenset({
    "ton_service_id",
    "ton_template_id",
    "ton_public_key",
})


class EmailRelaySettings(BaseModel):
    """Credentials and sender overrides for the receipt e-mail relay."""

    service_id: str = ""
    template_id: str = ""
    public_key: str = ""
    from_name: str = ""
    from_email: str = ""
    reply_to: str = ""
    bcc: str = ""
    cc: str = ""

    @classmethod
    def from_env(cls) -> EmailRelaySettings:
        """Build settings from EMAILJS_* environment variables."""
        return cls(
            service_id=os.environ.get("EMAILJS_SERVICE_ID", ""),
            template_id=os.environ.get("EMAILJS_TEMPLATE_ID", ""),
            public_key=os.environ.get("EMAILJS_PUBLIC_KEY", ""),
            from_name=os.environ.get("EMAILJS_FROM_NAME", ""),
            from_email=os.environ.get("EMAILJS_FROM_EMAIL", ""),
            reply_to=os.environ.get("EMAILJS_REPLY_TO", ""),
            bcc=os.environ.get("EMAILJS_BCC", ""),
            cc=os.environ.get("EMAILJS_CC", ""),
        )

    @property
    def is_configured(self) -> bool:
        """All three credentials present and none left at its placeholder."""
        credentials = (self.service_id, self.template_id, self.public_key)
        return all(credentials) and not PLACEHOLDER_VALUES.intersection(credentials)
