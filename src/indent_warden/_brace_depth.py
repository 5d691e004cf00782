"""Textual nesting: how deep do the braces go once comments are gone."""

from indent_warden._laws import MAX_BRACE_DEPTH


def exceeds_brace_depth(text):
    """True as soon as the running brace depth passes MAX_BRACE_DEPTH.

    Every `{` and `}` counts, including ones inside string and char
    literals. Unbalanced closing braces just drive the level negative.
    """
    nesting_level = 0
    for ch in text:
        if ch == "{":
            nesting_level += 1
            if nesting_level > MAX_BRACE_DEPTH:
                return True
        elif ch == "}":
            nesting_level -= 1
    return False
