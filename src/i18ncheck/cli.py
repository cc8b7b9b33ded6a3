"""Command-line entry point: ``i18ncheck [PATH ...]``.

Options are resolved with the precedence command line > project file
(``.i18ncheck.yaml``) > environment / ``.env`` > built-in defaults.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from i18ncheck import __version__
from i18ncheck.checker.validator import I18nValidator
from i18ncheck.models.config import CheckerConfig, ProjectConfig
from i18ncheck.models.errors import ConfigurationError
from i18ncheck.parser.config_loader import ConfigLoader
from i18ncheck.reporting import render_json, render_text
from i18ncheck.service.runner import CheckRunner
from i18ncheck.settings import Settings

logger = logging.getLogger("i18ncheck.cli")

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG_ERROR = 2


@dataclass
class RunOptions:
    """Fully resolved options for one run."""

    config: CheckerConfig
    include: list[str]
    exclude: list[str]
    workers: int


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18ncheck",
        description="Report template text that is not marked for translation",
    )
    parser.add_argument("paths", nargs="*", default=["."],
                        help="Files or directories to check (default: .)")
    parser.add_argument("-c", "--config", help="Project configuration file (YAML)")
    parser.add_argument("--attr-name", help="Name of the marker attribute")
    parser.add_argument("--attr-pattern",
                        help="Regular expression a marker value must contain")
    parser.add_argument("--ignore-tags",
                        help="Comma-separated tag names whose content is not checked")
    parser.add_argument("--disable-comment",
                        help="Comment payload that disables checks for its parent element")
    parser.add_argument("--include", action="append",
                        help="Glob of files to check inside directories (repeatable)")
    parser.add_argument("--exclude", action="append",
                        help="Glob of files to skip (repeatable)")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format")
    parser.add_argument("--workers", type=int, help="Number of worker threads")
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(
    args: argparse.Namespace,
    settings: Settings,
    project: ProjectConfig | None = None,
) -> RunOptions:
    """Merge command line, project file and settings into run options.

    Raises ``pydantic.ValidationError`` if the merged marker rules are unusable.
    """
    project = project or ProjectConfig()

    def pick(cli_value, project_value, default):
        if cli_value is not None:
            return cli_value
        if project_value is not None:
            return project_value
        return default

    ignore_tags = (
        [tag.strip() for tag in args.ignore_tags.split(",") if tag.strip()]
        if args.ignore_tags is not None
        else None
    )
    config = CheckerConfig(
        attr_name=pick(args.attr_name, project.attr_name, settings.attr_name),
        attr_pattern=pick(args.attr_pattern, project.attr_pattern, settings.attr_pattern),
        ignore_tags=frozenset(pick(ignore_tags, project.ignore_tags, settings.ignore_tags)),
        disable_comment=pick(
            args.disable_comment, project.disable_comment, settings.disable_comment
        ),
    )
    return RunOptions(
        config=config,
        include=pick(args.include, project.include, settings.include),
        exclude=pick(args.exclude, project.exclude, settings.exclude),
        workers=pick(args.workers, project.workers, settings.workers),
    )


def _load_project(args: argparse.Namespace, settings: Settings) -> ProjectConfig | None:
    loader = ConfigLoader()
    explicit = args.config or settings.config_file
    if explicit:
        return loader.load(Path(explicit))
    found = ConfigLoader.find(Path.cwd())
    if found is None:
        return None
    logger.info("Using project configuration %s", found)
    return loader.load(found)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())
    logger.info("i18ncheck v%s", __version__)

    try:
        project = _load_project(args, settings)
        options = resolve_options(args, settings, project)
    except ConfigurationError as exc:
        for issue in exc.issues:
            print(f"configuration error: {issue.describe()}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ValidationError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if options.workers < 1:
        parser.error("--workers must be at least 1")

    runner = CheckRunner(I18nValidator(options.config), workers=options.workers)
    paths = runner.discover(
        [Path(p) for p in args.paths], include=options.include, exclude=options.exclude
    )
    report = runner.check_paths(paths)

    if args.format == "json":
        print(render_json(report))
    else:
        print(render_text(report))
    return EXIT_OK if report.ok else EXIT_PROBLEMS


def run() -> None:
    sys.exit(main())
