"""Human and machine readable renderings of a check report."""

from __future__ import annotations

from i18ncheck.models.problems import ProblemKind
from i18ncheck.models.report import CheckReport

_DESCRIPTIONS: dict[ProblemKind, str] = {
    ProblemKind.MISSING: "text without i18n marker",
    ProblemKind.FORMAT: "i18n marker does not match the required format",
    ProblemKind.NESTED: "i18n marker contains another i18n marker",
}


def render_text(report: CheckReport) -> str:
    lines: list[str] = []
    for file_report in report.files:
        if file_report.error is not None:
            lines.append(f"{file_report.file_name}: error: {file_report.error}")
        for problem in file_report.problems:
            lines.append(
                f"{problem.file_name}:{problem.line}: {problem.problem}: "
                f"{_DESCRIPTIONS[problem.problem]}: {problem.meta!r}"
            )
    counts = report.counts
    summary = ", ".join(f"{counts[kind]} {kind}" for kind in ProblemKind)
    lines.append(
        f"{len(report.files)} file(s) checked, {len(report.problems)} problem(s) "
        f"({summary}), {len(report.errors)} error(s)"
    )
    return "\n".join(lines)


def render_json(report: CheckReport) -> str:
    return report.model_dump_json(indent=2)
