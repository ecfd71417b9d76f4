"""Typed loading of the optional ``brewship.toml`` release config.

The file lives at the repository root. Every key is optional; anything left
unset is resolved at run time (see ``ReleaseConfig``). The release version is
deliberately not configurable: it always comes from the binary itself.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_TEST_FLAG",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "brewship.toml"
DEFAULT_TEST_FLAG = "--version"

_STRING_KEYS = ("tap", "homepage_base", "description", "binary", "test_flag", "notes")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when brewship.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release settings.

    Attributes:
        tap: Formula repository slug (``owner/homebrew-tap`` when unset)
        homepage_base: URL prefix for homepage and download URLs
            (``https://github.com/<owner>`` when unset)
        description: Formula ``desc`` (hosted repo description when unset)
        binary: Binary file name at the repository root (repo name when unset)
        test_flag: Flag passed to the binary for version detection and the
            formula smoke test
        notes: Release notes body (``Release <tag>`` when unset)
    """

    tap: str | None = None
    homepage_base: str | None = None
    description: str | None = None
    binary: str | None = None
    test_flag: str = DEFAULT_TEST_FLAG
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create a config from parsed TOML.

        Raises:
            TypeError: A known key holds a non-string value.
            ValueError: ``binary`` is not a plain file name.
        """
        for key in _STRING_KEYS:
            if key in data and not isinstance(data[key], str):
                raise TypeError(f"'{key}' must be a string")

        binary = get_str(data, "binary")
        if binary is not None and (binary in {".", ".."} or any(c in binary for c in "/\\")):
            raise ValueError(f"'binary' must be a file name at the repository root: {binary}")

        homepage_base = get_str(data, "homepage_base")
        return cls(
            tap=get_str(data, "tap"),
            homepage_base=homepage_base.rstrip("/") if homepage_base else None,
            description=get_str(data, "description"),
            binary=binary,
            test_flag=get_str(data, "test_flag") or DEFAULT_TEST_FLAG,
            notes=get_str(data, "notes"),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and validate brewship.toml.

    Args:
        path: Path to the config file

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(repo_root: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load ``<repo_root>/brewship.toml``; a missing file yields defaults."""
    path = repo_root / CONFIG_FILENAME
    if not path.exists():
        return Ok(ReleaseConfig())
    return load_config(path)
