from zoneinfo import ZoneInfo

from django.conf import settings


def to_local_iso(dt_utc):
    """Render a UTC timestamp in the configured display time zone."""
    return dt_utc.astimezone(ZoneInfo(settings.DISPLAY_TIME_ZONE)).isoformat()
