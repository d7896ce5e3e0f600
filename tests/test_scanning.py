"""Scan and aggregation tests."""

from __future__ import annotations

from pathlib import Path

from mean_linter.diff_parser import AddedLine
from mean_linter.rules import build_rules
from mean_linter.rules.base import Finding
from mean_linter.scanning import Verdict, evaluate_line, group_by_file, scan_diff_text

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "diffs"


def test_console_statement_in_new_file_is_rejected() -> None:
    verdict = scan_diff_text(_diff("src/app.js", "@@ -0,0 +1 @@", 'console.log("debug")'))

    assert verdict.ok is False
    assert verdict.issues == [
        Finding(
            rule_id="console",
            file="src/app.js",
            line_number=1,
            code='console.log("debug")',
            message=build_rules()[0].message,
            matched_text="console.log(",
        )
    ]


def test_single_letter_let_does_not_count_as_var() -> None:
    verdict = scan_diff_text(_diff("src/math.js", "@@ -3,0 +4 @@", "let x = 1;"))
    assert [(item.rule_id, item.line_number, item.matched_text) for item in verdict.issues] == [
        ("single-letter-vars", 4, "let x")
    ]


def test_var_declaration_yields_one_finding_per_line() -> None:
    verdict = scan_diff_text(
        _diff("src/a.js", "@@ -0,0 +1,2 @@", "var first = 1; var second = 2;", "var third = 3;")
    )
    var_findings = [item for item in verdict.issues if item.rule_id == "var"]
    assert [item.line_number for item in var_findings] == [1, 2]


def test_line_numbers_follow_hunk_start() -> None:
    verdict = scan_diff_text(_diff("a.js", "@@ -1,0 +5 @@", "eval(a)", "eval(b)", "eval(c)"))
    assert [item.line_number for item in verdict.issues] == [5, 6, 7]


def test_no_added_lines_is_ok() -> None:
    verdict = scan_diff_text("\n".join(["--- a/src/a.js", "+++ b/src/a.js", "@@ -1 +0,0 @@", "-x"]))
    assert verdict.ok is True
    assert verdict.issues == []


def test_empty_diff_is_ok() -> None:
    assert scan_diff_text("").ok is True


def test_disabled_rule_never_fires() -> None:
    rules = build_rules({"console"})
    verdict = scan_diff_text(_diff("src/app.js", "@@ -0,0 +1 @@", "console.log()"), rules)
    assert verdict.ok is True


def test_skip_listed_file_never_fires() -> None:
    verdict = scan_diff_text(
        _diff("package-lock.json", "@@ -0,0 +1 @@", "var x == eval(y); // TODO")
    )
    assert verdict.ok is True


def test_all_matching_rules_report_in_catalog_order() -> None:
    line = AddedLine(file="src/a.js", line_number=9, text="  var x = a == b; // TODO fix  ")
    findings = evaluate_line(line, build_rules())

    assert [item.rule_id for item in findings] == [
        "var",
        "single-letter-vars",
        "todo-comment",
        "loose-eq",
    ]
    assert {item.code for item in findings} == {"var x = a == b; // TODO fix"}
    assert findings[0].matched_text == "var"


def test_evaluate_line_with_no_rules_finds_nothing() -> None:
    assert evaluate_line(AddedLine(file="a.js", line_number=1, text="eval(x)"), []) == []


def test_scan_is_idempotent() -> None:
    diff_text = (FIXTURE_DIR / "staged.diff").read_text(encoding="utf-8")
    assert scan_diff_text(diff_text).issues == scan_diff_text(diff_text).issues


def test_staged_fixture_findings() -> None:
    diff_text = (FIXTURE_DIR / "staged.diff").read_text(encoding="utf-8")
    verdict = scan_diff_text(diff_text)
    assert [(item.file, item.line_number, item.rule_id) for item in verdict.issues] == [
        ("src/app.js", 3, "var"),
        ("src/app.js", 11, "console"),
        ("lib/util.js", 2, "loose-eq"),
    ]


def test_group_by_file_keeps_first_seen_order() -> None:
    findings = [
        _finding("b.js", 1, "var"),
        _finding("a.js", 4, "eval"),
        _finding("b.js", 7, "alert"),
    ]
    grouped = group_by_file(findings)
    assert list(grouped) == ["b.js", "a.js"]
    assert [item.rule_id for item in grouped["b.js"]] == ["var", "alert"]


def test_verdict_ok_tracks_issues() -> None:
    assert Verdict().ok is True
    assert Verdict(issues=[_finding("a.js", 1, "eval")]).ok is False


def _diff(path: str, hunk_header: str, *added: str) -> str:
    return "\n".join(
        [
            f"diff --git a/{path} b/{path}",
            f"--- a/{path}",
            f"+++ b/{path}",
            hunk_header,
            *(f"+{line}" for line in added),
        ]
    )


def _finding(path: str, line_number: int, rule_id: str) -> Finding:
    return Finding(
        rule_id=rule_id,
        file=path,
        line_number=line_number,
        code="code",
        message=f"message:{rule_id}",
        matched_text="match",
    )
