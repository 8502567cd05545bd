#!/usr/bin/env python3
"""
Report accumulator for the content validation pipeline.

Every check receives the same Report and writes its findings through it.
Messages are printed as they happen, tagged by severity, and errors and
warnings are counted so the orchestrator can decide the verdict once at
the end of the run.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, TextIO

if TYPE_CHECKING:
    from schemas import SchemaViolation

ERROR = "error"
WARN = "warn"
INFO = "info"
SUCCESS = "success"


class Verdict(Enum):
    """Overall outcome of a validation run."""
    PASSED = "passed"
    PASSED_WITH_WARNINGS = "passed_with_warnings"
    FAILED = "failed"


@dataclass
class ReportMessage:
    """One reported line, kept for inspection after the run."""
    severity: str
    text: str

    def format(self) -> str:
        return f"[{self.severity.upper()}] {self.text}"


@dataclass
class Report:
    """
    Mutable accumulator threaded through every validation step.

    Attributes:
        out: Stream receiving the transcript (stdout when not given)
        errors: Number of errors reported so far
        warnings: Number of warnings reported so far
        messages: Every error, warning, info and success line, in order
    """
    out: Optional[TextIO] = None
    errors: int = 0
    warnings: int = 0
    messages: List[ReportMessage] = field(default_factory=list)

    def _print(self, line: str = "") -> None:
        print(line, file=self.out if self.out is not None else sys.stdout)

    def _add(self, severity: str, text: str) -> None:
        message = ReportMessage(severity, text)
        self.messages.append(message)
        self._print(message.format())

    def error(self, text: str) -> None:
        self.errors += 1
        self._add(ERROR, text)

    def warn(self, text: str) -> None:
        self.warnings += 1
        self._add(WARN, text)

    def info(self, text: str) -> None:
        self._add(INFO, text)

    def success(self, text: str) -> None:
        self._add(SUCCESS, text)

    def violations(self, subject: str, violations: Sequence["SchemaViolation"]) -> None:
        """
        Report schema violations as one error each, grouped under a header.

        Args:
            subject: What was validated (file or document name)
            violations: SchemaViolation objects, one error per item

        Example:
            [ERROR] en/faq.mdx: does not match schema (2 problems)
              - title.cz: 'cz' is a required property
              - created: 'created' is a required property
        """
        plural = "problem" if len(violations) == 1 else "problems"
        self._print(f"[ERROR] {subject}: does not match schema ({len(violations)} {plural})")
        for violation in violations:
            self.errors += 1
            text = f"{subject}: {violation.path}: {violation.message}"
            self.messages.append(ReportMessage(ERROR, text))
            self._print(f"  - {violation.path}: {violation.message}")

    def banner(self, title: str) -> None:
        self._print("=" * 60)
        self._print(title)
        self._print("=" * 60)

    def step(self, title: str) -> None:
        self._print(f"\n{title}")
        self._print("-" * 60)

    def lines(self, severity: str) -> List[str]:
        """Texts of all reported messages with the given severity."""
        return [m.text for m in self.messages if m.severity == severity]

    def verdict(self) -> Verdict:
        if self.errors > 0:
            return Verdict.FAILED
        if self.warnings > 0:
            return Verdict.PASSED_WITH_WARNINGS
        return Verdict.PASSED

    def finish(self) -> int:
        """
        Print the summary and return the process exit code.

        The summary is always the last thing written to the transcript.

        Returns:
            Exit code: 1 when any error was reported, 0 otherwise
        """
        verdict = self.verdict()
        self._print("\n" + "=" * 60)
        self._print("VALIDATION SUMMARY")
        self._print("=" * 60)
        self._print(f"Errors: {self.errors}")
        self._print(f"Warnings: {self.warnings}")

        if verdict is Verdict.FAILED:
            self._print(f"\n[FAILED] Content validation failed with {self.errors} error(s)")
            return 1
        if verdict is Verdict.PASSED_WITH_WARNINGS:
            self._print(f"\n[PASSED] Content validation passed with {self.warnings} warning(s)")
            return 0
        self._print("\n[PASSED] All content checks passed")
        return 0
