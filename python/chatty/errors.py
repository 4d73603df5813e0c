# Exceptions raised by the parsing helpers.
# Emitter and bootstrap catch these and report them as error records.


class ChattyError(Exception):
    """Base for all chatty errors."""


class SeverityParseError(ChattyError, ValueError):
    """Severity text matched no mnemonic, or matched more than one severity."""


class EmptySeverityError(SeverityParseError):
    """Severity text was empty or blank."""


class UnknownOutputFormatError(ChattyError, ValueError):
    """A setter was given a format other than "json" or "plain"."""
