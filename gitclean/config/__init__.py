"""Configuration Management Package"""

import json
import logging
import sys
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Optional

from gitclean.git import find_git_root

logger = logging.getLogger(__name__)

MIN_DEBOUNCE_MS = 0
MAX_DEBOUNCE_MS = 5000


class ConfigError(Exception):
    """Raised when a config file cannot be written."""
    pass


def _known_keys(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass
class SpellCheckSettings:
    """Live spell checking in the commit prompts."""
    enabled: bool = True
    debounce_ms: int = 200
    custom_words: list[str] = field(default_factory=list)

    def validate(self) -> list[str]:
        warnings = []
        defaults = SpellCheckSettings()

        if not isinstance(self.enabled, bool):
            warnings.append(f"Invalid spellcheck.enabled '{self.enabled}', using {defaults.enabled}")
            self.enabled = defaults.enabled

        if (not isinstance(self.debounce_ms, int) or isinstance(self.debounce_ms, bool)
                or not MIN_DEBOUNCE_MS <= self.debounce_ms <= MAX_DEBOUNCE_MS):
            warnings.append(f"Invalid spellcheck.debounce_ms '{self.debounce_ms}', using {defaults.debounce_ms}")
            self.debounce_ms = defaults.debounce_ms

        if not isinstance(self.custom_words, list) or not all(isinstance(w, str) for w in self.custom_words):
            warnings.append("Invalid spellcheck.custom_words, expected a list of strings")
            self.custom_words = []

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'SpellCheckSettings':
        return cls(**_known_keys(cls, data))


@dataclass
class WorkflowSettings:
    """What happens after the commit message is confirmed."""
    auto_add: bool = True
    auto_push: bool = True
    add_files: list[str] = field(default_factory=lambda: ["."])

    def validate(self) -> list[str]:
        warnings = []
        defaults = WorkflowSettings()

        for name in ("auto_add", "auto_push"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                warnings.append(f"Invalid workflow.{name} '{value}', using {getattr(defaults, name)}")
                setattr(self, name, getattr(defaults, name))

        if (not isinstance(self.add_files, list) or not self.add_files
                or not all(isinstance(p, str) and p for p in self.add_files)):
            warnings.append(f"Invalid workflow.add_files '{self.add_files}', using {defaults.add_files}")
            self.add_files = defaults.add_files

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'WorkflowSettings':
        return cls(**_known_keys(cls, data))


@dataclass
class Config:
    """User configuration with sensible defaults."""
    spellcheck: SpellCheckSettings = field(default_factory=SpellCheckSettings)
    workflow: WorkflowSettings = field(default_factory=WorkflowSettings)
    max_subject_length: int = 72

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if (not isinstance(self.max_subject_length, int) or isinstance(self.max_subject_length, bool)
                or self.max_subject_length <= 0):
            warnings.append(f"Invalid max_subject_length '{self.max_subject_length}', using {defaults.max_subject_length}")
            self.max_subject_length = defaults.max_subject_length

        warnings.extend(self.spellcheck.validate())
        warnings.extend(self.workflow.validate())
        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        if not isinstance(data, dict):
            print("Config warning: config file must contain a JSON object, using defaults", file=sys.stderr)
            return cls()

        spellcheck = data.get("spellcheck", {})
        workflow = data.get("workflow", {})
        warnings = []
        if not isinstance(spellcheck, dict):
            warnings.append("Invalid spellcheck section, using defaults")
            spellcheck = {}
        if not isinstance(workflow, dict):
            warnings.append("Invalid workflow section, using defaults")
            workflow = {}

        config = cls(
            spellcheck=SpellCheckSettings.from_dict(spellcheck),
            workflow=WorkflowSettings.from_dict(workflow),
            max_subject_length=data.get("max_subject_length", cls.max_subject_length),
        )
        # Validate and print warnings to stderr
        for warning in warnings + config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".gitclean.json"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def candidate_paths(self) -> list[Path]:
        """Lookup order: repository root, current directory, home."""
        paths = []
        root = find_git_root()
        if root is not None:
            paths.append(root / self.CONFIG_FILENAME)
        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path not in paths:
            paths.append(local_path)
        paths.append(Path.home() / self.CONFIG_FILENAME)
        return paths

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in self.candidate_paths():
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        logger.debug("Loading config from %s", path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return Config.from_dict(data)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def default_path(self, global_config: bool = False) -> Path:
        if global_config:
            return Path.home() / self.CONFIG_FILENAME
        root = find_git_root()
        return (root or Path.cwd()) / self.CONFIG_FILENAME

    def save(self, config: Config, path: Optional[Path] = None, overwrite: bool = True) -> Path:
        path = Path(path) if path is not None else self.default_path()
        if path.exists() and not overwrite:
            raise ConfigError(f"Config file already exists: {path}")
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=2)
                f.write("\n")
        except OSError as e:
            raise ConfigError(f"Could not write {path}: {e}")
        self._config = config
        self._config_path = path
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path

    def reset(self) -> None:
        self._config = None
        self._config_path = None


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, path: Optional[Path] = None) -> Path:
    return _manager.save(config, path)


def create_default_config(path: Optional[Path] = None) -> Path:
    """Write a default config file; never overwrites an existing one."""
    return _manager.save(Config(), path, overwrite=False)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "SpellCheckSettings",
    "WorkflowSettings",
    "load_config",
    "save_config",
    "create_default_config",
    "get_config_path",
]
