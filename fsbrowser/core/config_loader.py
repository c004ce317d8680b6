"""
fsbrowser Configuration Loader

Configuration management for the explorer:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, Union, get_args, get_origin


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


@dataclass
class AppConfig:
    """Application identification settings."""
    name: str = "fsbrowser"
    version: str = "1.0.0"
    welcome_message: str = "Welcome to Linux File Explorer!"


@dataclass
class ExplorerConfig:
    """Explorer engine settings."""
    start_directory: Optional[str] = None  # None means the process cwd
    directory_mode: int = 0o755
    copy_buffer_size: int = 65536


@dataclass
class SearchConfig:
    """Search settings."""
    follow_symlinks: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class ShellConfig:
    """Shell configuration settings."""
    prompt: str = "Enter your choice: "
    confirm_delete: bool = True
    pause_after_command: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the explorer.
    """
    app: AppConfig = field(default_factory=AppConfig)
    explorer: ExplorerConfig = field(default_factory=ExplorerConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.app.name)
        fsbrowser
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigError: If the file cannot be loaded or parsed
            ConfigValidationError: If a value is out of range
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be a JSON object")

        config = self._parse_config(data)
        self._validate(config)

        self._config = config
        self._loaded = True
        return self._config

    @staticmethod
    def _parse_section(section_cls: type, defaults: Any, data: Any, name: str) -> Any:
        """Build one dataclass section, falling back to its defaults."""
        if not isinstance(data, dict):
            raise ConfigValidationError(f"Section '{name}' must be a JSON object")

        types = {f.name: f.type for f in fields(section_cls)}
        unknown = set(data) - set(types)
        if unknown:
            raise ConfigValidationError(
                f"Unknown keys in section '{name}': {', '.join(sorted(unknown))}"
            )

        for key, value in data.items():
            ConfigLoader._check_type(f"{name}.{key}", value, types[key])

        values = {
            key: data.get(key, getattr(defaults, key))
            for key in types
        }
        return section_cls(**values)

    @staticmethod
    def _check_type(key: str, value: Any, expected: Any) -> None:
        """Raise unless ``value`` matches the field annotation ``expected``."""
        if get_origin(expected) is Union:
            allowed = get_args(expected)
        else:
            allowed = (expected,)

        # bool is an int subclass; only bool fields accept true/false
        if isinstance(value, bool) and bool not in allowed:
            valid = False
        else:
            valid = isinstance(value, allowed)

        if not valid:
            names = " or ".join(
                'null' if t is type(None) else t.__name__ for t in allowed
            )
            raise ConfigValidationError(
                f"{key} must be {names}, got {type(value).__name__}: {value!r}"
            )

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'app' in data:
            config.app = self._parse_section(AppConfig, config.app, data['app'], 'app')

        if 'explorer' in data:
            explorer_data = data['explorer']
            # Directory modes are written as octal strings ("755") in JSON;
            # a bare number would be read as decimal
            if isinstance(explorer_data, dict) and 'directory_mode' in explorer_data:
                raw_mode = explorer_data['directory_mode']
                if not isinstance(raw_mode, str):
                    raise ConfigValidationError(
                        f"explorer.directory_mode must be an octal string such as \"755\", "
                        f"got {raw_mode!r}"
                    )
                explorer_data = dict(explorer_data)
                try:
                    explorer_data['directory_mode'] = int(raw_mode, 8)
                except ValueError:
                    raise ConfigValidationError(
                        f"Invalid directory_mode: {raw_mode!r}"
                    ) from None
            config.explorer = self._parse_section(
                ExplorerConfig, config.explorer, explorer_data, 'explorer'
            )

        if 'search' in data:
            config.search = self._parse_section(SearchConfig, config.search, data['search'], 'search')

        if 'logging' in data:
            config.logging = self._parse_section(
                LoggingConfig, config.logging, data['logging'], 'logging'
            )

        if 'shell' in data:
            config.shell = self._parse_section(ShellConfig, config.shell, data['shell'], 'shell')

        return config

    @staticmethod
    def _validate(config: Config) -> None:
        """Check value ranges that the dataclasses cannot express."""
        if not 0 <= config.explorer.directory_mode <= 0o7777:
            raise ConfigValidationError(
                f"explorer.directory_mode out of range: {oct(config.explorer.directory_mode)}"
            )
        if config.explorer.copy_buffer_size <= 0:
            raise ConfigValidationError("explorer.copy_buffer_size must be positive")
        start = config.explorer.start_directory
        if start is not None and not start.startswith('/'):
            raise ConfigValidationError(
                f"explorer.start_directory must be absolute: {start}"
            )
        if config.logging.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigValidationError(f"Unknown logging.level: {config.logging.level}")

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'search.follow_symlinks')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.confirm_delete')
            value: Value to set

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
        else:
            raise ConfigValidationError(f"Invalid configuration key: {key}")

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Drop any loaded configuration and return to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
