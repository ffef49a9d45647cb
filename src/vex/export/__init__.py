"""vex export: source text reconstruction from the syntax tree.

Public API::

    from vex.export import to_source_text
    text = to_source_text(expr)
"""

from .text import to_source_text

__all__ = ["to_source_text"]
