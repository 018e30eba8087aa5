"""Source map version 3: the position table and its Base64 VLQ encoding."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

# [generated_column, source_index, source_line, source_column]; lines are 0-based
Segment = list[int]
Mappings = list[list[Segment]]

_BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VLQ_SHIFT = 5
_VLQ_CONTINUATION = 1 << _VLQ_SHIFT
_VLQ_MASK = _VLQ_CONTINUATION - 1

DATA_URL_PREFIX = "data:application/json;charset=utf-8;base64,"


def encode_vlq(value: int) -> str:
    """Encode one signed integer as Base64 VLQ digits."""
    # sign goes in the lowest bit
    value = ((-value) << 1) | 1 if value < 0 else value << 1
    digits: list[str] = []
    while True:
        digit = value & _VLQ_MASK
        value >>= _VLQ_SHIFT
        if value:
            digit |= _VLQ_CONTINUATION
        digits.append(_BASE64_DIGITS[digit])
        if not value:
            return "".join(digits)


def encode_mappings(mappings: Mappings) -> str:
    """Encode per-line segment lists into the ``mappings`` string.

    The generated column is relative to the previous segment on the same
    line; source index, line and column are relative to the previous
    segment anywhere in the map.
    """
    source_index = 0
    source_line = 0
    source_column = 0
    lines: list[str] = []

    for line in mappings:
        generated_column = 0
        encoded: list[str] = []
        for segment in line:
            parts = [encode_vlq(segment[0] - generated_column)]
            generated_column = segment[0]
            if len(segment) >= 4:
                parts.append(encode_vlq(segment[1] - source_index))
                parts.append(encode_vlq(segment[2] - source_line))
                parts.append(encode_vlq(segment[3] - source_column))
                source_index, source_line, source_column = segment[1], segment[2], segment[3]
            encoded.append("".join(parts))
        lines.append(",".join(encoded))

    return ";".join(lines)


@dataclass(slots=True)
class SourceMap:
    """Position map from generated code back to the printed tree's source."""

    mappings: str | Mappings
    sources: list[str | None] = field(default_factory=lambda: [None])
    sources_content: list[str | None] = field(default_factory=lambda: [None])
    names: list[str] = field(default_factory=list)
    version: int = 3

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "names": self.names,
            "sources": self.sources,
            "sourcesContent": self.sources_content,
            "mappings": self.mappings,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def __str__(self) -> str:
        return self.to_json()

    def to_url(self) -> str:
        """The map as a ``data:`` URI, for an inline ``sourceMappingURL`` comment."""
        payload = base64.b64encode(self.to_json().encode("utf-8")).decode("ascii")
        return DATA_URL_PREFIX + payload
