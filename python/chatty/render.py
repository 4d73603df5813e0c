# Record renderers. Every rendered record is a single line ending in "\n".
#
# plain:          <ts>\t<level>\t<msg>,\tk=v,\tk=v
# json:           {"ts":..,"level":..,"msg":..,"details":{..}}  (string-built, no escaping)
# json escaped:   same shape via json.dumps; raises on encoder failure

from __future__ import annotations
import json
from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from .severity import OutputFormat, Severity

Pairs = List[Tuple[str, Any]]


def now_rfc3339() -> str:
    ts = datetime.now().astimezone().isoformat(timespec="seconds")
    if ts.endswith("+00:00"):
        ts = ts[:-6] + "Z"
    return ts


def as_text(value: Any) -> str:
    """str() that never raises."""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def sorted_pairs(attachments: Optional[Mapping[str, Any]]) -> Pairs:
    if not attachments:
        return []
    return sorted(((as_text(k), v) for k, v in attachments.items()), key=lambda kv: kv[0])


def render_plain(now: str, level: str, msg: str, pairs: Pairs) -> str:
    parts = [now, "\t", level, "\t", msg]
    for k, v in pairs:
        parts.append(",\t" + k + "=" + as_text(v))
    parts.append("\n")
    return "".join(parts)


def _raw_json_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return '"' + as_text(value) + '"'


def render_json(now: str, level: str, msg: str, pairs: Pairs) -> str:
    head = '{"ts":"' + now + '","level":"' + level + '","msg":"' + msg + '"'
    if not pairs:
        return head + "}\n"
    details = ",".join('"' + k + '":' + _raw_json_value(v) for k, v in pairs)
    return head + ',"details":{' + details + "}}\n"


def render_json_escaped(now: str, level: str, msg: str, pairs: Pairs) -> str:
    rec: dict[str, Any] = {"ts": now, "level": level, "msg": msg}
    if pairs:
        rec["details"] = dict(pairs)
    return json.dumps(rec, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=as_text) + "\n"


def render_internal_error(now: str, fmt: OutputFormat, text: str) -> str:
    # Raw concatenation only: this path reports encoder failures and must not fail itself.
    level = Severity.ERROR.label
    if fmt is OutputFormat.JSON:
        return '{"ts":"' + now + '","level":"' + level + '","msg":"' + text + '"}\n'
    return now + "\t" + level + "\t" + text + "\n"
