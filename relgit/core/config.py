"""Typed configuration loading.

The configuration lives in a TOML file (``.relgit.toml`` at the repository
root by default) and is parsed into frozen dataclasses. Only the ``[git]``
table is read; unknown keys are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CHANGELOG",
    "Config",
    "ConfigError",
    "GitConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = ".relgit.toml"

DEFAULT_CHANGELOG = 'git log --pretty=format:"* %s (%h)" [REV_RANGE]'


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """Settings for the git side of a release.

    Message and name fields are templates using ``${version}``,
    ``${latestVersion}`` and ``${tagName}`` placeholders.
    """

    changelog: str = DEFAULT_CHANGELOG
    tag_name: str = "${version}"
    commit_message: str = "Release ${version}"
    tag_annotation: str = "Release ${version}"
    commit_args: str = ""
    tag_args: str = ""
    push_args: str = ""
    push_repo: str = ""
    add_untracked_files: bool = False
    require_clean_working_dir: bool = True
    require_upstream: bool = True
    commit: bool = True
    tag: bool = True
    push: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> GitConfig:
        d = cls()

        def text(key: str, default: str) -> str:
            value = get_str(data, key)
            return default if value is None else value

        def flag(key: str, default: bool) -> bool:
            value = get_bool(data, key)
            return default if value is None else value

        return cls(
            changelog=text("changelog", d.changelog),
            tag_name=text("tag_name", d.tag_name),
            commit_message=text("commit_message", d.commit_message),
            tag_annotation=text("tag_annotation", d.tag_annotation),
            commit_args=text("commit_args", d.commit_args),
            tag_args=text("tag_args", d.tag_args),
            push_args=text("push_args", d.push_args),
            push_repo=text("push_repo", d.push_repo),
            add_untracked_files=flag("add_untracked_files", d.add_untracked_files),
            require_clean_working_dir=flag(
                "require_clean_working_dir", d.require_clean_working_dir
            ),
            require_upstream=flag("require_upstream", d.require_upstream),
            commit=flag("commit", d.commit),
            tag=flag("tag", d.tag),
            push=flag("push", d.push),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        git: StrDict = get_table(data, "git") or {}
        return cls(git=GitConfig.from_dict(git))


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the defaults if it cannot be read."""
    return load_config(path).value_or(Config())
