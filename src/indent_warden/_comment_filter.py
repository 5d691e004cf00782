"""Drop comment-only lines before counting braces.

This is a line heuristic, not a lexer. A trimmed line is a comment if it
starts with `//`, `*` or `/*`, or ends with `*/`. Nothing carries over
between lines, so code after a closing `*/` on the same line is lost and
trailing `// ...` comments after code are kept. Only the braces of what
survives matter downstream, which is why the lines are joined without
a separator.
"""

import re

from indent_warden._laws import COMMENT_PREFIXES, COMMENT_SUFFIX


# Line breaks as Java counts them. Form feed and friends are whitespace.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _is_comment_line(line):
    trimmed = line.strip()
    return trimmed.startswith(COMMENT_PREFIXES) or trimmed.endswith(COMMENT_SUFFIX)


def strip_comment_lines(text):
    return "".join(line for line in _LINE_BREAK.split(text) if not _is_comment_line(line))
