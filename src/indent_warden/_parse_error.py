"""Raised when a file cannot be turned into a SourceFile.

Never caught by the constraint. A file that does not parse has no verdict,
so the scanner reports it on its own line instead of passing it.
"""


class ParseError(Exception):
    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
