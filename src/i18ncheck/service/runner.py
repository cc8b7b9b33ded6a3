"""Runs the validator over files on disk, in parallel."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from fnmatch import fnmatch
from pathlib import Path

from i18ncheck.checker.validator import I18nValidator
from i18ncheck.models.report import CheckReport, FileReport
from i18ncheck.parser.loader import MarkupSafetyError

logger = logging.getLogger("i18ncheck.runner")


class CheckRunner:
    """Discovers template files and checks them with a shared validator.

    The validator only holds immutable configuration, so worker threads
    share it without locking.
    """

    def __init__(self, validator: I18nValidator, workers: int = 4) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._validator = validator
        self._workers = workers

    @staticmethod
    def discover(
        roots: Iterable[Path],
        include: Sequence[str] = ("**/*.html",),
        exclude: Sequence[str] = (),
    ) -> list[Path]:
        """Expand directories with *include* globs and drop *exclude* matches.

        Explicitly named files are always kept.  Exclude patterns are
        matched against the path relative to its root, using ``/``.
        """
        found: set[Path] = set()
        for root in roots:
            if root.is_file():
                found.add(root)
                continue
            if not root.is_dir():
                logger.warning("Skipping %s: no such file or directory", root)
                continue
            for pattern in include:
                for path in root.glob(pattern):
                    if not path.is_file():
                        continue
                    relative = path.relative_to(root).as_posix()
                    if any(fnmatch(relative, ex) for ex in exclude):
                        continue
                    found.add(path)
        return sorted(found)

    def check_file(self, path: Path) -> FileReport:
        """Check one file; read and safety failures are captured, not raised."""
        file_name = str(path)
        try:
            content = path.read_text(encoding="utf-8")
            problems = self._validator.process_file(file_name, content)
        except (OSError, UnicodeDecodeError, MarkupSafetyError) as exc:
            logger.warning("Skipping %s: %s", file_name, exc)
            return FileReport(file_name=file_name, error=str(exc))
        return FileReport(file_name=file_name, problems=problems)

    def check_paths(self, paths: Sequence[Path]) -> CheckReport:
        """Check *paths*; results keep the input order."""
        logger.info("Checking %d file(s) with %d worker(s)", len(paths), self._workers)
        if self._workers == 1 or len(paths) <= 1:
            files = [self.check_file(path) for path in paths]
        else:
            with ThreadPoolExecutor(
                max_workers=self._workers, thread_name_prefix="i18ncheck"
            ) as pool:
                files = list(pool.map(self.check_file, paths))
        report = CheckReport(files=files)
        logger.info(
            "Checked %d file(s): %d problem(s), %d error(s)",
            len(files),
            len(report.problems),
            len(report.errors),
        )
        return report
