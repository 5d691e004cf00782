"""The rule itself: a method may hold one control block, never one inside another.

Two passes, because each misses what the other catches. Braces show deep
blocks of any kind; the syntax tree shows brace-less bodies like
`for (...) if (x) y();`. The cheap textual pass runs first and the tree is
only walked when it passes.
"""

from indent_warden._brace_depth import exceeds_brace_depth
from indent_warden._braceless_nesting import has_nested_blocks
from indent_warden._comment_filter import strip_comment_lines
from indent_warden._evaluation import Conformant, Violation
from indent_warden._laws import MESSAGE


def evaluate(source_file):
    """Conformant or Violation for the file's primary type. Pure: no I/O."""
    if exceeds_brace_depth(strip_comment_lines(source_file.raw_text)):
        return Violation(source_file.type_name, MESSAGE)
    methods = getattr(source_file.primary_type, "methods", None) or []
    if any(has_nested_blocks(method) for method in methods):
        return Violation(source_file.type_name, MESSAGE)
    return Conformant()
