"""Source text for literal values that carry no raw form."""

from __future__ import annotations

import math

# Characters that would end the literal early if emitted as-is
_LINE_TERMINATORS: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def quote_string(value: str, quote: str) -> str:
    """Quote *value* with *quote*, escaping only what the literal cannot hold.

    Backslashes and the chosen quote character are escaped, as are line
    terminators. Everything else, including the other quote character, is
    emitted verbatim.
    """
    result: list[str] = [quote]
    for ch in value:
        if ch == "\\":
            result.append("\\\\")
        elif ch == quote:
            result.append("\\" + ch)
        elif ch in _LINE_TERMINATORS:
            result.append(_LINE_TERMINATORS[ch])
        else:
            result.append(ch)
    result.append(quote)
    return "".join(result)


def format_number(value: int | float) -> str:
    """Canonical JavaScript spelling of a non-negative numeric literal."""
    if isinstance(value, int):
        return str(value)
    if math.isinf(value):
        return "Infinity"
    if math.isnan(value):
        return "NaN"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    # Python pads exponents (1e-07); JavaScript does not (1e-7)
    mantissa, _, exponent = text.partition("e")
    exp = int(exponent)
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def format_literal(value: object, quote: str) -> str:
    """Source text for a Literal ``value`` when the node has no ``raw``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return quote_string(value, quote)
    return str(value)
