"""Per-file and per-run results of a check."""

from __future__ import annotations

from pydantic import BaseModel

from i18ncheck.models.problems import Problem, ProblemKind


class FileReport(BaseModel):
    """Problems found in one file, or the reason it could not be checked."""

    file_name: str
    problems: list[Problem] = []
    error: str | None = None


class CheckReport(BaseModel):
    """Aggregated result of checking a set of files."""

    files: list[FileReport] = []

    @property
    def problems(self) -> list[Problem]:
        return [problem for report in self.files for problem in report.problems]

    @property
    def errors(self) -> list[FileReport]:
        return [report for report in self.files if report.error is not None]

    @property
    def counts(self) -> dict[ProblemKind, int]:
        counts = {kind: 0 for kind in ProblemKind}
        for problem in self.problems:
            counts[problem.problem] += 1
        return counts

    @property
    def ok(self) -> bool:
        return not self.problems and not self.errors
