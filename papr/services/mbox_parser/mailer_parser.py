"""Parser for the `From <daemon> <date>` line that starts an mbox message."""

from datetime import datetime, timezone

from papr.models.message import Mailer
from .base import InvalidTimestampError, MalformedMailerLineError

MAILER_TOKEN = "From"
MAILER_DATE_FORMAT = "%a %b %d %H:%M:%S %Y %z"


class MailerParser:
    """Parse mailer lines such as `From git@z Thu Jan  1 00:00:00 1970`."""

    def is_mailer_line(self, line: str) -> bool:
        """Return True if the line is an mbox marker (`From ` with a space, not `From:`)."""
        return line.startswith(MAILER_TOKEN + " ")

    def parse(self, line: str) -> Mailer:
        """
        Parse a mailer line.

        Args:
            line: First line of a message

        Returns:
            Mailer with daemon and UTC timestamp

        Raises:
            MalformedMailerLineError: If the line has fewer than 7 tokens or
                does not start with `From`
            InvalidTimestampError: If the date tokens are not a valid date

        Notes:
            - The line carries no timezone; the timestamp is always read as +0000
        """
        line = line.strip()
        parts = line.split()

        if len(parts) < 7:
            raise MalformedMailerLineError(f"Invalid mailer line: {line}", context=line)

        if parts[0] != MAILER_TOKEN:
            raise MalformedMailerLineError(
                f"Invalid mailer line: {line}. Should start with `From `", context=line
            )

        daemon = parts[1]
        date = f"{parts[2]} {parts[3]} {parts[4]} {parts[5]} {parts[6]} +0000"

        try:
            timestamp = datetime.strptime(date, MAILER_DATE_FORMAT)
        except ValueError as e:
            raise InvalidTimestampError(f"Invalid date in mailer line {line!r}: {e}", context=line)

        return Mailer(daemon=daemon, timestamp=timestamp.astimezone(timezone.utc))
