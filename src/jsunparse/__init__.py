"""ESTree JavaScript/TypeScript printer with source maps."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from jsunparse.errors import LayoutError, OptionsError, UnhandledNodeError
from jsunparse.options import PrintOptions

if TYPE_CHECKING:
    from jsunparse.nodes import Node
    from jsunparse.printer import PrintResult

__version__ = "0.1.0"


def print(
    node: Node | Sequence[Node],
    options: PrintOptions | None = None,
    **overrides: Any,
) -> PrintResult:
    """Print an ESTree syntax tree as source code plus a source map."""
    from jsunparse.printer import print_node

    return print_node(node, options, **overrides)

