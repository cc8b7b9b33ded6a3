"""Project configuration loader with YAML source position tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from i18ncheck.models.config import ProjectConfig
from i18ncheck.models.errors import ConfigIssue, ConfigurationError, SourceSpan

CONFIG_FILE_NAMES = (".i18ncheck.yaml", ".i18ncheck.yml")

_MAX_CONFIG_SIZE = 100_000


@dataclass
class SourceMap:
    """Maps top-level YAML keys to their source positions for error reporting."""

    _positions: dict[str, SourceSpan] = field(default_factory=dict)

    def add(self, path: str, span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: str) -> SourceSpan | None:
        return self._positions.get(path)


class ConfigLoader:
    """Loads ``.i18ncheck.yaml`` files into :class:`ProjectConfig`.

    Uses ruamel.yaml so that every reported problem can point at the line
    of the offending key.
    """

    def __init__(self) -> None:
        self._yaml = YAML(typ="rt")

    @staticmethod
    def find(start: Path) -> Path | None:
        """Return the first project file found in *start* or its parents."""
        directory = start if start.is_dir() else start.parent
        for candidate_dir in (directory, *directory.parents):
            for name in CONFIG_FILE_NAMES:
                candidate = candidate_dir / name
                if candidate.is_file():
                    return candidate
        return None

    def load(self, path: Path) -> ProjectConfig:
        """Load a project file, raising ``ConfigurationError`` on any problem."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise ConfigurationError(
                [ConfigIssue(code="CONFIG_UNREADABLE", message=str(exc))]
            ) from exc
        return self.load_string(content, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> ProjectConfig:
        if len(content) > _MAX_CONFIG_SIZE:
            raise ConfigurationError(
                [
                    ConfigIssue(
                        code="CONFIG_TOO_LARGE",
                        message=f"Configuration exceeds {_MAX_CONFIG_SIZE:,} characters",
                    )
                ]
            )
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            span = None
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                span = SourceSpan(file=filename, line=mark.line + 1, column=mark.column + 1)
            raise ConfigurationError(
                [ConfigIssue(code="CONFIG_PARSE_ERROR", message=str(exc), span=span)]
            ) from exc

        if data is None:
            return ProjectConfig()
        if not isinstance(data, dict):
            raise ConfigurationError(
                [
                    ConfigIssue(
                        code="CONFIG_NOT_A_MAPPING",
                        message="Configuration must be a YAML mapping",
                        span=SourceSpan(file=filename, line=1, column=1),
                    )
                ]
            )

        source_map = self._extract_positions(data, filename)
        try:
            return ProjectConfig.model_validate(_to_plain(data))
        except ValidationError as exc:
            raise ConfigurationError(self._issues(exc, source_map)) from exc

    @staticmethod
    def _extract_positions(data: Any, filename: str) -> SourceMap:
        source_map = SourceMap()
        if not isinstance(data, CommentedMap):
            return source_map
        for key in data:
            try:
                line, col = data.lc.key(key)
            except (AttributeError, KeyError, TypeError):
                continue
            source_map.add(str(key), SourceSpan(file=filename, line=line + 1, column=col + 1))
        return source_map

    @staticmethod
    def _issues(exc: ValidationError, source_map: SourceMap) -> list[ConfigIssue]:
        issues: list[ConfigIssue] = []
        for error in exc.errors():
            loc = error.get("loc", ())
            key = str(loc[0]) if loc else None
            issues.append(
                ConfigIssue(
                    code="CONFIG_INVALID_VALUE"
                    if error.get("type") != "extra_forbidden"
                    else "CONFIG_UNKNOWN_KEY",
                    message=error.get("msg", "invalid value"),
                    path=".".join(str(part) for part in loc) or None,
                    span=source_map.get(key) if key else None,
                )
            )
        return issues


def _to_plain(data: Any) -> Any:
    """Convert ruamel.yaml CommentedMap/Seq to plain Python dict/list."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(item) for item in data]
    return data
