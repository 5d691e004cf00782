"""Walk the project tree, judge every Java file, sort into buckets.

The scanner sees everything. Every .java file is parsed and evaluated;
the warden:vetted mark decides which bucket the result lands in
(violations vs vetted), never whether the check runs. A file that will
not parse is a finding of its own, not a pass.
"""

import fnmatch
import logging
import os

from indent_warden._laws import SKIP_DIRS, VETTED_MARK
from indent_warden._one_level_of_indentation import evaluate
from indent_warden._parse_error import ParseError
from indent_warden._source_file import SourceFile

log = logging.getLogger(__name__)


def _is_vetted(full):
    """Check if the gatekeeper has reviewed and accepted this file.

    Only the first 10 lines are scanned so the mark can't hide mid-file.
    """
    try:
        with open(full, encoding="utf-8", errors="replace") as f:
            for _, line in zip(range(10), f):
                if VETTED_MARK in line:
                    return True
    except OSError:
        pass
    return False


def _judge(rel, full):
    try:
        source_file = SourceFile.from_path(full)
    except ParseError as e:
        return ("parse", f"{rel}: {e.reason}")
    result = evaluate(source_file)
    if result.is_violation:
        return ("indent", f"{rel}: {result}")
    return None


def scan(root, args):
    """Walk every .java file under root, return (violations, vetted).

    Both lists contain (rule, detail) tuples. The only difference
    is whether the file carried warden:vetted; the checks are identical.
    """
    violations = []
    vetted = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for fname in sorted(filenames):
            if not fname.endswith(".java"):
                continue
            if any(fnmatch.fnmatch(fname, pat) for pat in args.ignore):
                log.debug("ignored %s", fname)
                continue
            full = os.path.join(dirpath, fname)
            rel = os.path.relpath(full, root)
            if any(fnmatch.fnmatch(rel, pat) for pat in args.ignore):
                log.debug("ignored %s", rel)
                continue

            log.debug("checking %s", rel)
            finding = _judge(rel, full)
            if finding is None:
                continue
            # A file that does not parse has no verdict to vet.
            if finding[0] == "indent" and _is_vetted(full):
                vetted.append(finding)
            else:
                violations.append(finding)

    return violations, vetted
