"""
Timezone handling utilities for the Clockify MCP Server.

Clockify expects ISO 8601 timestamps in UTC. Timestamps that already carry
an offset are forwarded as given; naive ones are read in the machine's
local timezone and converted.
"""

import datetime
from datetime import timezone
from typing import Optional

import structlog
from tzlocal import get_localzone

log = structlog.get_logger(__name__)

UTC_API_FORMAT = "%Y-%m-%dT%H:%M:%SZ"  # Format accepted by the Clockify API
LOCAL_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class TimezoneConverter:
    """
    Handles timestamp normalisation for the Clockify API.
    """

    def __init__(self):
        """Initialize with system's local timezone, falling back to UTC if unavailable."""
        try:
            self.local_tz = get_localzone()
        except Exception as e:
            log.warning("local_timezone_unavailable", error=str(e))
            self.local_tz = timezone.utc

    def get_timezone_info(self) -> dict:
        """
        Get information about the system timezone.

        Returns:
            dict: timezone name, UTC offset and the current local time
        """
        now = datetime.datetime.now(self.local_tz)
        return {
            "timezone_name": str(self.local_tz),
            "timezone_offset": now.strftime("%z"),
            "current_time": now.strftime(LOCAL_DISPLAY_FORMAT),
        }

    def get_current_utc_time(self) -> str:
        """
        Get the current UTC time formatted for the Clockify API.

        Returns:
            str: e.g. '2025-04-09T16:15:22Z'
        """
        return self.format_for_api(datetime.datetime.now(timezone.utc))

    def format_for_api(self, dt: datetime.datetime) -> str:
        return dt.strftime(UTC_API_FORMAT)

    def to_api_timestamp(self, value: Optional[str]) -> Optional[str]:
        """
        Normalise a caller supplied timestamp for the Clockify API.

        Args:
            value: ISO 8601 timestamp, with or without an offset

        Returns:
            The value unchanged when it carries an offset (or cannot be parsed),
            otherwise the local time converted to UTC.
        """
        if not value:
            return value

        try:
            parsed = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            # Let Clockify reject it with its own message
            return value

        if parsed.tzinfo is not None:
            return value

        if hasattr(self.local_tz, "localize"):
            # pytz style
            local_dt = self.local_tz.localize(parsed)
        else:
            local_dt = parsed.replace(tzinfo=self.local_tz)

        return self.format_for_api(local_dt.astimezone(timezone.utc))


# Create a global instance for import
tz_converter = TimezoneConverter()
