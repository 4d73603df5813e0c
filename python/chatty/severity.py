# Severity levels, output formats and the text parsers behind them.

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Mapping

from .errors import EmptySeverityError, SeverityParseError, UnknownOutputFormatError


class Severity(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """Text written in records. FATAL is displayed as "critical"."""
        return _LABELS[self]


_LABELS = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FATAL: "critical",
}


class OutputFormat(Enum):
    PLAIN = "plain"
    JSON = "json"


MNEMONICS: Mapping[str, Severity] = {
    "debug": Severity.DEBUG,
    "verbose": Severity.DEBUG,
    "info": Severity.INFO,
    "normal": Severity.INFO,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
    "fatal": Severity.FATAL,
    "critical": Severity.FATAL,
}


def parse_severity(text: str, mnemonics: Mapping[str, Severity] = MNEMONICS) -> Severity:
    """Resolve free-form severity text such as "d", "warn" or " CRITICAL ".

    The input is trimmed and lower-cased, then matched as a prefix of the
    known mnemonics. An exact mnemonic always wins. A prefix that reaches
    mnemonics of two different severities is rejected as ambiguous.
    """
    x = (text or "").strip().lower()
    if not x:
        raise EmptySeverityError("empty severity level")
    if x in mnemonics:
        return mnemonics[x]
    found = {sev for name, sev in mnemonics.items() if name.startswith(x)}
    if len(found) == 1:
        return found.pop()
    if found:
        names = ", ".join(s.name.lower() for s in sorted(found))
        raise SeverityParseError(f"ambiguous severity level {text} (matches {names})")
    raise SeverityParseError(f"unknown severity level {text}")


def parse_output_format(text: str, strict: bool = False) -> OutputFormat:
    """Map format text to an OutputFormat.

    Lenient mode (used at startup) treats anything but "json" as plain.
    Strict mode (used by setters) only accepts "json" and "plain".
    """
    x = (text or "").strip().lower()
    if x == OutputFormat.JSON.value:
        return OutputFormat.JSON
    if not strict or x == OutputFormat.PLAIN.value:
        return OutputFormat.PLAIN
    raise UnknownOutputFormatError(f"unknown format given: {text}")
