# SPDX-License-Identifier: MIT
"""Configuration for srcsets.

The Configure class holds stored setting overrides (Android SDK levels,
test logging) in a JSON cache in the build directory, and turns them
into the typed settings the configuration pass consumes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import MISSING, Field, asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from srcsets.core.errors import ConfigureError

logger = logging.getLogger(__name__)


@dataclass
class AndroidSettings:
    """Android SDK and lint settings.

    Attributes:
        compile_sdk: API level to compile against.
        min_sdk: Lowest API level supported.
        lint_abort_on_error: Fail the build on lint errors.
        lint_warnings_as_errors: Treat lint warnings as errors.
    """

    compile_sdk: int = 29
    min_sdk: int = 15
    lint_abort_on_error: bool = True
    lint_warnings_as_errors: bool = True

    def validate(self) -> None:
        if self.min_sdk < 1:
            raise ConfigureError(f"min_sdk must be positive, got {self.min_sdk}")
        if self.min_sdk > self.compile_sdk:
            raise ConfigureError(
                f"min_sdk ({self.min_sdk}) is above compile_sdk ({self.compile_sdk})"
            )


@dataclass
class TestLoggingSettings:
    """How test tasks report results.

    Attributes:
        show_standard_streams: Echo test stdout/stderr.
        events: Test events that get logged.
    """

    __test__ = False  # not a pytest test class

    show_standard_streams: bool = True
    events: list[str] = field(default_factory=lambda: ["passed", "failed"])


def _default_of(f: Field) -> Any:
    if f.default_factory is not MISSING:
        return f.default_factory()
    return f.default


def _matches(default: Any, value: Any) -> bool:
    """Whether a stored value has the same shape as the field default."""
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        # bool is an int subclass but never a valid SDK level
        return isinstance(value, int) and not isinstance(value, bool)
    if isinstance(default, list):
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, type(default))


def _from_overrides(cls: type, overrides: Any) -> Any:
    if not isinstance(overrides, dict):
        raise ConfigureError(
            f"{cls.__name__} overrides must be an object, got {type(overrides).__name__}"
        )
    defaults = {f.name: _default_of(f) for f in fields(cls)}
    unknown = sorted(set(overrides) - set(defaults))
    if unknown:
        raise ConfigureError(f"unknown {cls.__name__} keys: {', '.join(unknown)}")
    for key, value in overrides.items():
        if not _matches(defaults[key], value):
            raise ConfigureError(
                f"{cls.__name__}.{key} must be {type(defaults[key]).__name__}, "
                f"got {value!r}"
            )
    return cls(**overrides)


class Configure:
    """Stored configuration for a build directory.

    Example:
        config = Configure(build_dir=Path("build"))
        config.set("android", {"min_sdk": 21})
        config.save()

        android = config.android_settings()  # compile_sdk=29, min_sdk=21

    Attributes:
        build_dir: Directory holding the cache file.
    """

    def __init__(
        self,
        *,
        build_dir: Path | str = "build",
        cache_file: str = "srcsets_config.json",
    ) -> None:
        self.build_dir = Path(build_dir)
        self._cache_file = cache_file
        self._cache: dict[str, Any] = {}

        # Try to load existing cache
        self._load_cache()

    def _cache_path(self) -> Path:
        return self.build_dir / self._cache_file

    def _load_cache(self) -> None:
        """Load configuration from cache file if it exists."""
        cache_path = self._cache_path()
        if cache_path.exists():
            try:
                with open(cache_path) as f:
                    self._cache = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", cache_path, e)
                self._cache = {}
                return
            if not isinstance(self._cache, dict):
                logger.warning(
                    "Ignoring config %s: expected an object, got %s",
                    cache_path,
                    type(self._cache).__name__,
                )
                self._cache = {}

    def save(self, path: Path | None = None) -> None:
        """Save configuration to cache file.

        Args:
            path: Optional path override for cache file.
        """
        cache_path = path or self._cache_path()
        cache_path.parent.mkdir(parents=True, exist_ok=True)

        with open(cache_path, "w") as f:
            json.dump(self._cache, f, indent=2, default=str)
            f.write("\n")
        logger.debug("Saved configuration to %s", cache_path)

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._cache.get(key, default)

    def android_settings(self) -> AndroidSettings:
        """Android settings: stored overrides over the defaults.

        Raises:
            ConfigureError: If the stored values are unknown, mistyped or
                inconsistent.
        """
        settings = _from_overrides(AndroidSettings, self.get("android", {}))
        settings.validate()
        return settings

    def test_logging_settings(self) -> TestLoggingSettings:
        return _from_overrides(TestLoggingSettings, self.get("test_logging", {}))

    def to_dict(self) -> dict[str, Any]:
        return {
            "android": asdict(self.android_settings()),
            "test_logging": asdict(self.test_logging_settings()),
        }
