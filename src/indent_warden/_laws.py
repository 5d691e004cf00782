"""What the warden watches for, and where it looks."""

# Class brace + method brace are unavoidable. One more block is the
# single level of indentation a method is allowed.
MAX_BRACE_DEPTH = 3

# Control depth inside one method. Counted from the method, not the file.
MAX_CONTROL_DEPTH = 1

MESSAGE = "More that one level of indentation."

# A trimmed line starting with any of these is a comment line.
COMMENT_PREFIXES = ("//", "*", "/*")
COMMENT_SUFFIX = "*/"

SKIP_DIRS = {".git", ".gradle", ".idea", "build", "target", "out", "node_modules"}

VETTED_MARK = "warden:vetted"

# Printed at the top of every scan. No secret rules.
LAWS = [
    "One level of indentation per method: no control block inside another",
    "Braces or not, `if (x) for (...) y();` is two levels",
    f"Brace depth above {MAX_BRACE_DEPTH} (class, method, one block) is a violation",
]
