#!/usr/bin/env python3
"""Test suite for the report accumulator."""

import io

from report import ERROR, INFO, SUCCESS, WARN, Report, Verdict
from schemas import SchemaViolation


def make_report():
    out = io.StringIO()
    return Report(out=out), out


def test_counters_only_track_errors_and_warnings():
    """info and success lines never change the counters."""
    report, _ = make_report()
    report.info("starting")
    report.success("fine")
    report.warn("hmm")
    report.error("bad")
    report.error("worse")
    assert report.errors == 2
    assert report.warnings == 1
    assert [m.severity for m in report.messages] == [INFO, SUCCESS, WARN, ERROR, ERROR]


def test_lines_are_tagged_by_severity():
    """Each message is printed with its severity tag."""
    report, out = make_report()
    report.error("missing file")
    report.warn("orphan")
    assert out.getvalue().splitlines() == ["[ERROR] missing file", "[WARN] orphan"]
    assert report.lines(WARN) == ["orphan"]


def test_violations_count_one_error_each():
    """Schema violations are grouped under a header but counted individually."""
    report, out = make_report()
    report.violations("en/faq.mdx", [
        SchemaViolation("created", "'created' is a required property"),
        SchemaViolation("title", "'cz' is a required property"),
    ])
    assert report.errors == 2
    assert out.getvalue().splitlines() == [
        "[ERROR] en/faq.mdx: does not match schema (2 problems)",
        "  - created: 'created' is a required property",
        "  - title: 'cz' is a required property",
    ]
    assert report.lines(ERROR)[1] == "en/faq.mdx: title: 'cz' is a required property"


def test_verdicts():
    """Errors fail the run; warnings alone do not."""
    report, _ = make_report()
    assert report.verdict() is Verdict.PASSED
    report.warn("orphan")
    assert report.verdict() is Verdict.PASSED_WITH_WARNINGS
    report.error("broken")
    assert report.verdict() is Verdict.FAILED


def test_finish_failed():
    """Failure summary is the last line and the exit code is non-zero."""
    report, out = make_report()
    report.error("broken")
    report.warn("orphan")
    assert report.finish() == 1
    lines = out.getvalue().splitlines()
    assert lines[-1] == "[FAILED] Content validation failed with 1 error(s)"
    assert "Warnings: 1" in lines


def test_finish_passed_with_warnings():
    """Warnings keep the exit code at zero."""
    report, out = make_report()
    report.warn("orphan")
    report.warn("another")
    assert report.finish() == 0
    assert out.getvalue().splitlines()[-1] == "[PASSED] Content validation passed with 2 warning(s)"


def test_finish_passed():
    """A clean run ends with the unconditional success line."""
    report, out = make_report()
    report.success("all good")
    assert report.finish() == 0
    assert out.getvalue().splitlines()[-1] == "[PASSED] All content checks passed"


def test_defaults_to_stdout(capsys):
    """Without an explicit stream the transcript goes to stdout."""
    report = Report()
    report.info("hello")
    assert capsys.readouterr().out == "[INFO] hello\n"
