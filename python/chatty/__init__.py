__all__ = [
    "init", "get_logger", "last_record", "emit",
    "Emitter", "Config", "Severity", "OutputFormat", "parse_severity", "parse_output_format",
    "ChattyError", "SeverityParseError", "EmptySeverityError", "UnknownOutputFormatError",
    "set_severity_level", "set_output_format", "set_escape_json",
    "set_global_severity_level", "set_global_output_format",
    "debug", "info", "warn", "error", "fatal",
    "debugf", "infof", "warnf", "errorf", "fatalf",
    "debug_kv", "info_kv", "warn_kv", "error_kv", "fatal_kv",
    "error_exc", "error_exc_return", "fatal_exc",
]
__version__ = "0.1.0"

from .config import Config
from .emitter import Emitter
from .errors import ChattyError, SeverityParseError, EmptySeverityError, UnknownOutputFormatError
from .severity import Severity, OutputFormat, parse_severity, parse_output_format
from .logging import (
    get_logger, last_record, emit, set_severity_level, set_output_format, set_escape_json,
    debug, info, warn, error, fatal, debugf, infof, warnf, errorf, fatalf,
    debug_kv, info_kv, warn_kv, error_kv, fatal_kv, error_exc, error_exc_return, fatal_exc,
)
from .bootstrap import init, set_global_severity_level, set_global_output_format

init()
