"""Configuration management for segpath."""

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from segpath.config.file_ops import write_text_file
from segpath.config.paths import default_config_path
from segpath.platform.logging import logger


DEFAULT_SEPARATORS: str = "/\\"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Accepted separator characters, canonical separator first
    separators: str = DEFAULT_SEPARATORS

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# segpath configuration file")
        lines.append("")

        lines.append("# Accepted path separators (first one is used when joining)")
        lines.append('# Example: separators = "/\\\\"')
        lines.append(f"separators = {self._format_toml_value(config['separators'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/segpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Args:
            source: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if source is None and cls._instance is not None:
            return cls._instance

        config_file = source or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            _ = config_dict.setdefault("separators", DEFAULT_SEPARATORS)
            _ = config_dict.setdefault("log_file", None)
            unknown = set(config_dict) - {"separators", "log_file"}
            for key in sorted(unknown):
                logger.warning("Ignoring unknown configuration key: %s", key)
                del config_dict[key]

            logger.info("Configuration loaded from %s", config_file)
            instance = cls(**config_dict)

        if source is None:
            cls._instance = instance
        return instance


# Global configuration instance
config = Config.load()
