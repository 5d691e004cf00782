"""The two verdicts a constraint can hand back to the engine.

Conformant and Violation are meaningless apart: every constraint returns
exactly one of them per file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Conformant:
    is_violation = False


@dataclass(frozen=True)
class Violation:
    type_name: str
    message: str

    is_violation = True

    def __str__(self):
        return f"{self.type_name}: {self.message}"
