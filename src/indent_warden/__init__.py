"""One level of indentation: scan a Java project for nested control blocks.

An Object-Calisthenics rule, enforced on its own: a method may open one
control block (if, for, while, do, try, catch) but never another inside
it. Nesting is measured twice. Braces are counted on the raw text with
comment lines dropped, and each method's syntax tree is walked so that
brace-less bodies like `for (...) if (x) y();` are caught too.

The warden reports every violation it finds. Files a reviewer has
accepted carry `// warden:vetted` near the top and move to the vetted
section. Files that fail to parse are always reported.

Usage:
    python3 -m indent_warden .                     # scan current dir
    python3 -m indent_warden . --strict            # exit 1 on unvetted violations
    python3 -m indent_warden . --ignore "*Test.java"
"""

import argparse
import logging
import os
import sys

from indent_warden._evaluation import Conformant, Violation
from indent_warden._one_level_of_indentation import evaluate
from indent_warden._parse_error import ParseError
from indent_warden._report import print_laws, print_report
from indent_warden._scanner import scan
from indent_warden._source_file import SourceFile

__version__ = "0.1.0"
__all__ = [
    "main", "scan", "evaluate", "print_report", "print_laws",
    "SourceFile", "Conformant", "Violation", "ParseError",
]


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="indent-warden",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
indent-warden: one level of indentation per method, for Java.

Scan: walks every .java file under a directory, parses it, and checks the
file's primary type (the type named after the file, else the first one).

Violations:
  indent  A method nests a control block inside another, braces or not,
          or the file's braces go deeper than class > method > block.
  parse   The file could not be parsed. It has no verdict, so it is
          never silently passed and cannot be vetted.

Skips: .git, .gradle, .idea, build, target, out, node_modules

warden:vetted: add '// warden:vetted' in the first 10 lines of a file
  to move its indent violation to the vetted section. It still shows.

  --strict exits 1 on unvetted violations only (for CI gates).""",
    )
    parser.add_argument("path", nargs="?", default=".", help="Root directory to scan")
    parser.add_argument("--strict", action="store_true", help="CI gate: exit 1 on unvetted violations only")
    parser.add_argument("--ignore", action="append", default=[], help="Glob patterns to skip (e.g. '*Test.java')")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file checked or skipped")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = os.path.abspath(args.path)
    print_laws()

    violations, vetted = scan(root, args)
    print_report(violations, vetted)

    if args.strict and violations:
        sys.exit(1)
