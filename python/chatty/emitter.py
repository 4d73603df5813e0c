# Record emitter: severity filtering, rendering, last-record cache and stdout write.

from __future__ import annotations
import sys, threading
from typing import Any, Callable, Mapping, Optional, TextIO, TypeVar, Union

from .config import Config
from .errors import SeverityParseError, UnknownOutputFormatError
from .render import (
    now_rfc3339, as_text, sorted_pairs, render_plain, render_json,
    render_json_escaped, render_internal_error,
)
from .severity import OutputFormat, Severity, parse_output_format, parse_severity

E = TypeVar("E", bound=BaseException)


class Emitter:
    """Writes leveled records to stdout according to a Config.

    Each instance owns its last-record slot. The package-level call surface
    shares one instance (see chatty.logging.get_logger); tests and embedders
    can build their own with an isolated Config.

    stream defaults to whatever sys.stdout is at write time. terminate is
    called with status 1 after a fatal record; it defaults to sys.exit.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        stream: Optional[TextIO] = None,
        terminate: Optional[Callable[[int], Any]] = None,
        clock: Callable[[], str] = now_rfc3339,
    ) -> None:
        self.config = config if config is not None else Config()
        self._stream = stream
        self._terminate = terminate if terminate is not None else sys.exit
        self._clock = clock
        self._last_lock = threading.Lock()
        self._last_record = ""

    def emit(self, severity: Severity, msg: str, attachments: Optional[Mapping[str, Any]] = None) -> None:
        if not msg and not attachments:
            return
        threshold, fmt, escape = self.config.snapshot()
        if severity < threshold:
            return

        now = self._clock()
        level = Severity(severity).label
        msg = as_text(msg) if msg else ""
        pairs = sorted_pairs(attachments)

        if fmt is OutputFormat.JSON:
            if escape:
                try:
                    record = render_json_escaped(now, level, msg, pairs)
                except Exception as e:
                    self._internal_error(now, fmt, threshold, f"error {e!r} marshalling message: {msg}")
                    record = render_json(now, level, msg, pairs)
            else:
                record = render_json(now, level, msg, pairs)
        else:
            record = render_plain(now, level, msg, pairs)

        try:
            with self._last_lock:
                self._last_record = record
            self._write(record)
        finally:
            if severity == Severity.FATAL:
                self._terminate(1)

    def last_record(self) -> str:
        """Most recent record that passed the filter, as written (with newline)."""
        with self._last_lock:
            return self._last_record

    def _write(self, record: str) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        try:
            try:
                out.write(record)
            except UnicodeEncodeError:
                enc = getattr(out, "encoding", None) or "ascii"
                out.write(record.encode(enc, "backslashreplace").decode(enc))
            out.flush()
        except (OSError, ValueError):
            # Closed or broken stream: nowhere left to report to.
            pass

    def _internal_error(self, now: str, fmt: OutputFormat, threshold: Severity, text: str) -> None:
        # Never routed through emit(): a failing encoder must not recurse.
        if Severity.ERROR < threshold:
            return
        self._write(render_internal_error(now, fmt, text))

    # -- configuration -------------------------------------------------

    def set_severity_level(self, value: Union[Severity, str]) -> None:
        if isinstance(value, Severity):
            self.config.severity = value
            return
        try:
            self.config.severity = parse_severity(value)
        except SeverityParseError as e:
            self.error(str(e))

    def set_output_format(self, value: Union[OutputFormat, str]) -> None:
        if isinstance(value, OutputFormat):
            self.config.output_format = value
            return
        try:
            self.config.output_format = parse_output_format(value, strict=True)
        except UnknownOutputFormatError as e:
            self.error(str(e))

    def set_escape_json(self, flag: bool) -> None:
        self.config.escape_json = flag

    # -- call surface --------------------------------------------------

    def debug(self, msg: str, **kv: Any) -> None: self.emit(Severity.DEBUG, msg, kv)
    def info(self, msg: str, **kv: Any) -> None: self.emit(Severity.INFO, msg, kv)
    def warn(self, msg: str, **kv: Any) -> None: self.emit(Severity.WARNING, msg, kv)
    def error(self, msg: str, **kv: Any) -> None: self.emit(Severity.ERROR, msg, kv)
    def fatal(self, msg: str, **kv: Any) -> None: self._fatal(msg, kv)

    def debugf(self, fmt: str, *args: Any) -> None: self.emit(Severity.DEBUG, _format(fmt, args))
    def infof(self, fmt: str, *args: Any) -> None: self.emit(Severity.INFO, _format(fmt, args))
    def warnf(self, fmt: str, *args: Any) -> None: self.emit(Severity.WARNING, _format(fmt, args))
    def errorf(self, fmt: str, *args: Any) -> None: self.emit(Severity.ERROR, _format(fmt, args))
    def fatalf(self, fmt: str, *args: Any) -> None: self._fatal(_format(fmt, args))

    def debug_kv(self, msg: str, kv: Mapping[str, Any]) -> None: self.emit(Severity.DEBUG, msg, kv)
    def info_kv(self, msg: str, kv: Mapping[str, Any]) -> None: self.emit(Severity.INFO, msg, kv)
    def warn_kv(self, msg: str, kv: Mapping[str, Any]) -> None: self.emit(Severity.WARNING, msg, kv)
    def error_kv(self, msg: str, kv: Mapping[str, Any]) -> None: self.emit(Severity.ERROR, msg, kv)
    def fatal_kv(self, msg: str, kv: Mapping[str, Any]) -> None: self._fatal(msg, kv)

    def error_exc(self, exc: Optional[BaseException]) -> None:
        """Log str(exc) at error. No-op when exc is None."""
        if exc is not None:
            self.emit(Severity.ERROR, as_text(exc))

    def error_exc_return(self, exc: E) -> E:
        """Log exc at error and hand it back, for `raise log.error_exc_return(err)`."""
        self.error_exc(exc)
        return exc

    def fatal_exc(self, exc: BaseException) -> None:
        self._fatal(as_text(exc))

    def _fatal(self, msg: str, kv: Optional[Mapping[str, Any]] = None) -> None:
        if not msg and not kv:
            # emit() drops empty records before its own exit step; fatal calls still exit.
            self._terminate(1)
            return
        self.emit(Severity.FATAL, msg, kv)


def _format(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError) as e:
        return f"{fmt} (format error: {e}; args={args!r})"
