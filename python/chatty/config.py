# Process-wide logging configuration: threshold, format and JSON escaping.
# One lock guards all three fields so snapshot() sees a consistent view.

from __future__ import annotations
import threading
from typing import Tuple

from .severity import OutputFormat, Severity


class Config:
    def __init__(
        self,
        severity: Severity = Severity.INFO,
        output_format: OutputFormat = OutputFormat.PLAIN,
        escape_json: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._severity = Severity(severity)
        self._output_format = OutputFormat(output_format)
        self._escape_json = bool(escape_json)

    @property
    def severity(self) -> Severity:
        with self._lock:
            return self._severity

    @severity.setter
    def severity(self, value: Severity) -> None:
        value = Severity(value)
        with self._lock:
            self._severity = value

    @property
    def output_format(self) -> OutputFormat:
        with self._lock:
            return self._output_format

    @output_format.setter
    def output_format(self, value: OutputFormat) -> None:
        value = OutputFormat(value)
        with self._lock:
            self._output_format = value

    @property
    def escape_json(self) -> bool:
        """Encode JSON records with json.dumps instead of string building.

        Off by default: the string-built form is much faster but produces
        invalid JSON when text contains quotes or control characters.
        """
        with self._lock:
            return self._escape_json

    @escape_json.setter
    def escape_json(self, value: bool) -> None:
        with self._lock:
            self._escape_json = bool(value)

    def snapshot(self) -> Tuple[Severity, OutputFormat, bool]:
        with self._lock:
            return self._severity, self._output_format, self._escape_json

    def __repr__(self) -> str:
        sev, fmt, esc = self.snapshot()
        return f"Config(severity={sev.name}, output_format={fmt.value}, escape_json={esc})"
