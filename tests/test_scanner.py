import argparse
import textwrap

import pytest

from indent_warden import main, scan

NESTED = """
    public class Nested {
        public void run(int n) {
            while (n > 0) if (n > 2) n--;
        }
    }
"""
FLAT = """
    public class Flat {
        public void run(int n) {
            while (n > 0) n--;
        }
    }
"""


def _write(root, rel, source):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source))
    return path


def _args(*ignore):
    return argparse.Namespace(ignore=list(ignore))


@pytest.fixture
def project(tmp_path):
    _write(tmp_path, "src/Nested.java", NESTED)
    _write(tmp_path, "src/Flat.java", FLAT)
    _write(tmp_path, "src/Broken.java", "public class Broken {\n")
    _write(tmp_path, "src/notes.txt", NESTED)
    _write(tmp_path, "build/Generated.java", NESTED.replace("Nested", "Generated"))
    return tmp_path


def test_scan_sorts_findings_by_rule(project):
    violations, vetted = scan(str(project), _args())
    rules = sorted(rule for rule, _ in violations)
    assert rules == ["indent", "parse"]
    details = dict(violations)
    assert details["indent"] == "src/Nested.java: Nested: More that one level of indentation."
    assert details["parse"].startswith("src/Broken.java: ")
    assert vetted == []


def test_scan_skips_build_dirs_and_non_java(project):
    violations, _ = scan(str(project), _args())
    assert not any("Generated" in detail for _, detail in violations)
    assert not any("notes" in detail for _, detail in violations)


def test_scan_ignores_by_basename_and_relative_path(project):
    violations, _ = scan(str(project), _args("Nested.java", "src/Broken*"))
    assert violations == []


def test_vetted_file_moves_to_vetted_section(project):
    _write(project, "src/Nested.java", "// warden:vetted\n" + textwrap.dedent(NESTED))
    violations, vetted = scan(str(project), _args())
    assert [rule for rule, _ in violations] == ["parse"]
    assert [rule for rule, _ in vetted] == ["indent"]


def test_vetted_mark_cannot_hide_a_parse_error(project):
    _write(project, "src/Broken.java", "// warden:vetted\npublic class Broken {\n")
    violations, vetted = scan(str(project), _args())
    assert "parse" in [rule for rule, _ in violations]
    assert vetted == []


def test_main_prints_laws_and_report(project, capsys):
    main([str(project)])
    out = capsys.readouterr().out
    assert out.startswith("Laws:")
    assert "src/Nested.java: Nested: More that one level of indentation." in out
    assert "2 violation(s)" in out


def test_main_strict_exits_on_violations(project):
    with pytest.raises(SystemExit) as info:
        main([str(project), "--strict"])
    assert info.value.code == 1


def test_main_strict_passes_clean_tree(tmp_path, capsys):
    _write(tmp_path, "Flat.java", FLAT)
    main([str(tmp_path), "--strict"])
    assert "No violations found." in capsys.readouterr().out


def test_main_strict_passes_when_only_vetted(tmp_path, capsys):
    _write(tmp_path, "Nested.java", "// warden:vetted\n" + textwrap.dedent(NESTED))
    main([str(tmp_path), "--strict"])
    out = capsys.readouterr().out
    assert "--- vetted (1) ---" in out
    assert "No unvetted violations." in out


def test_broken_symlink_is_reported_and_scan_continues(project):
    (project / "src" / "Gone.java").symlink_to(project / "nowhere" / "Gone.java")
    violations, _ = scan(str(project), _args())
    details = [detail for _, detail in violations]
    assert "src/Nested.java: Nested: More that one level of indentation." in details
    assert ("parse", "src/Gone.java: No such file or directory") in violations


def test_report_groups_findings_by_rule(project, capsys):
    main([str(project)])
    out = capsys.readouterr().out
    assert "Nested control blocks (1):" in out
    assert "Could not parse (1):" in out
    assert out.index("Nested control blocks") < out.index("Could not parse")
