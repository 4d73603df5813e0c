# Package-level call surface. Every function delegates to one shared Emitter,
# configured from the environment by bootstrap.init() when chatty is imported.

from __future__ import annotations
from typing import Any, Mapping, Optional, Union

from .emitter import E, Emitter
from .severity import OutputFormat, Severity

_global_logger: Emitter = Emitter()


def get_logger() -> Emitter:
    return _global_logger


def emit(severity: Severity, msg: str, attachments: Optional[Mapping[str, Any]] = None) -> None:
    _global_logger.emit(severity, msg, attachments)

def last_record() -> str:
    return _global_logger.last_record()

def set_severity_level(value: Union[Severity, str]) -> None: _global_logger.set_severity_level(value)
def set_output_format(value: Union[OutputFormat, str]) -> None: _global_logger.set_output_format(value)
def set_escape_json(flag: bool) -> None: _global_logger.set_escape_json(flag)

def debug(msg: str, **kv: Any) -> None: _global_logger.debug(msg, **kv)
def info(msg: str, **kv: Any) -> None: _global_logger.info(msg, **kv)
def warn(msg: str, **kv: Any) -> None: _global_logger.warn(msg, **kv)
def error(msg: str, **kv: Any) -> None: _global_logger.error(msg, **kv)
def fatal(msg: str, **kv: Any) -> None: _global_logger.fatal(msg, **kv)

def debugf(fmt: str, *args: Any) -> None: _global_logger.debugf(fmt, *args)
def infof(fmt: str, *args: Any) -> None: _global_logger.infof(fmt, *args)
def warnf(fmt: str, *args: Any) -> None: _global_logger.warnf(fmt, *args)
def errorf(fmt: str, *args: Any) -> None: _global_logger.errorf(fmt, *args)
def fatalf(fmt: str, *args: Any) -> None: _global_logger.fatalf(fmt, *args)

def debug_kv(msg: str, kv: Mapping[str, Any]) -> None: _global_logger.debug_kv(msg, kv)
def info_kv(msg: str, kv: Mapping[str, Any]) -> None: _global_logger.info_kv(msg, kv)
def warn_kv(msg: str, kv: Mapping[str, Any]) -> None: _global_logger.warn_kv(msg, kv)
def error_kv(msg: str, kv: Mapping[str, Any]) -> None: _global_logger.error_kv(msg, kv)
def fatal_kv(msg: str, kv: Mapping[str, Any]) -> None: _global_logger.fatal_kv(msg, kv)

def error_exc(exc: Optional[BaseException]) -> None: _global_logger.error_exc(exc)
def error_exc_return(exc: E) -> E: return _global_logger.error_exc_return(exc)
def fatal_exc(exc: BaseException) -> None: _global_logger.fatal_exc(exc)
