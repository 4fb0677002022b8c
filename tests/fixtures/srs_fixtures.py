"""Helpers creating SRS services with a frozen clock."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from mailsrs.application.services import SRSService
from mailsrs.domain.value_objects import SRSOptions

SECRET_KEY = "aSecretKey"
MAX_AGE = timedelta(days=7)

# 2025-06-15T15:06:40Z, its day encodes as "Y6"
NOW = datetime.fromtimestamp(1750000000, UTC)


def fixed_clock(moment: datetime = NOW) -> Callable[[], datetime]:
    """Return a clock frozen at a moment."""
    return lambda: moment


def make_service(
    secret_key: str = SECRET_KEY,
    moment: datetime = NOW,
    **options: object,
) -> SRSService:
    """Create an SRSService with a frozen clock and a 7 day lifetime."""
    options.setdefault("lifetime", MAX_AGE)
    return SRSService(secret_key, SRSOptions(**options), clock=fixed_clock(moment))
