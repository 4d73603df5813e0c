# Process-start configuration from the environment, plus setters that also
# export the environment variables so child processes inherit them.
import os
from typing import Mapping, Optional, Union

from .errors import SeverityParseError, UnknownOutputFormatError
from .logging import get_logger
from .severity import OutputFormat, Severity, parse_output_format, parse_severity

SEVERITY_ENV = "LOG_SEVERITY_LEVEL"
FORMAT_ENV = "LOG_OUTPUT_FORMAT"


def init(environ: Optional[Mapping[str, str]] = None) -> None:
    """Configure the shared logger from LOG_SEVERITY_LEVEL and LOG_OUTPUT_FORMAT.

    Runs once when chatty is imported; call again to reconfigure.
    The format is applied first so a severity parse error is reported in it.
    An unset severity keeps the default (info) silently; a set but
    unparseable one is reported at error and also keeps info.
    """
    env = os.environ if environ is None else environ
    logger = get_logger()
    cfg = logger.config

    cfg.output_format = parse_output_format(env.get(FORMAT_ENV, ""))
    cfg.escape_json = False
    cfg.severity = Severity.INFO
    raw = env.get(SEVERITY_ENV)
    if raw is None:
        return
    try:
        cfg.severity = parse_severity(raw)
    except SeverityParseError as e:
        logger.error_exc(e)


def set_global_severity_level(value: Union[Severity, str]) -> None:
    """Set the shared threshold and export it as LOG_SEVERITY_LEVEL."""
    logger = get_logger()
    try:
        sev = value if isinstance(value, Severity) else parse_severity(value)
    except SeverityParseError as e:
        logger.error_exc(e)
        return
    _export(SEVERITY_ENV, sev.name.lower(), "set_global_severity_level")
    logger.config.severity = sev


def set_global_output_format(value: Union[OutputFormat, str]) -> None:
    """Set the shared output format and export it as LOG_OUTPUT_FORMAT."""
    logger = get_logger()
    try:
        fmt = value if isinstance(value, OutputFormat) else parse_output_format(value, strict=True)
    except UnknownOutputFormatError as e:
        logger.error_exc(e)
        return
    _export(FORMAT_ENV, fmt.value, "set_global_output_format")
    logger.config.output_format = fmt


def _export(name: str, value: str, caller: str) -> None:
    try:
        os.environ[name] = value
    except (ValueError, OSError) as e:
        get_logger().errorf("chatty.%s error setting environment variable %s", caller, e)
