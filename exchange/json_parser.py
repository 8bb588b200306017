"""
exchange.json_parser - All-or-nothing decoding of a JSON array payload.

JSON is expected from machine-generated exports, so any structural or
type error on any element fails the whole document with one
RowParseError and no partial result.
"""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from exchange.csv_parser import decode_text
from exchange.errors import RowParseError
from exchange.report import ParseResult
from exchange.schemas import MediaItemPayload

_ITEMS = TypeAdapter(list[MediaItemPayload])


def parse_json(raw: str | bytes) -> ParseResult:
    try:
        items = _ITEMS.validate_json(decode_text(raw))
    except ValidationError as exc:
        raise RowParseError(_summarise(exc)) from exc

    result = ParseResult()
    for item in items:
        result.add(None, item.to_record())
    return result


def _summarise(exc: ValidationError) -> str:
    """First validation error, e.g. ``item 3 url: url is required``."""
    errors = exc.errors()
    first = errors[0]
    loc = list(first.get("loc", ()))
    where = []
    if loc and isinstance(loc[0], int):
        where.append(f"item {loc.pop(0) + 1}")
    if loc:
        where.append(".".join(str(part) for part in loc))
    msg = first.get("msg", "invalid value")
    prefix = " ".join(where) + ": " if where else ""
    more = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"invalid JSON payload: {prefix}{msg}{more}"
