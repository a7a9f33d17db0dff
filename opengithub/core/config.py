"""XDG-compliant configuration management for opengithub."""

import os
import tomllib
from pathlib import Path
from typing import Any, Optional


class Config:
    """Manages opengithub configuration following XDG Base Directory spec.

    Command-line flags and OPENGITHUB_* environment variables take precedence
    over values read here; this file only supplies defaults.

    Attributes:
        config_dir: Path to ~/.config/opengithub/
        config_file: Path to ~/.config/opengithub/config.toml
    """

    def __init__(self, config_dir: Optional[Path] = None, load: bool = True):
        """Initialize config paths using XDG Base Directory specification.

        Args:
            config_dir: Override for the configuration directory
            load: Read the config file if it exists
        """
        if config_dir is None:
            # Use XDG_CONFIG_HOME if set, otherwise default to ~/.config
            xdg_config = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / "opengithub"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.toml"

        # Load config if exists
        self._config = self._load() if load and self.config_file.exists() else {}

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_file.exists()

    def _load(self) -> dict:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise RuntimeError(f"Failed to load config {self.config_file}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'search.root')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def resolve(self, override: Any, key: str, default: Any = None) -> Any:
        """Return override unless it is None, else the config value, else default."""
        if override is not None:
            return override
        return self.get(key, default)

    @staticmethod
    def get_default_config() -> str:
        """Return default configuration TOML template."""
        return """# opengithub Configuration
# Location: ~/.config/opengithub/config.toml
# Follows XDG Base Directory Specification
#
# Precedence: command-line flag > OPENGITHUB_* environment variable > this file

[search]
# Directory searched for relative paths (default: current directory)
# Overridden by --root / $OPENGITHUB_ROOT
# root = "~/src"

[git]
# Branch used in generated links (default: current branch)
# Overridden by --branch / $OPENGITHUB_BRANCH
# branch = "main"

[browser]
# Open the generated link in the default browser
# Overridden by --open/--no-open / $OPENGITHUB_OPEN
open = true
"""

    def create_default(self) -> Path:
        """Create default configuration file.

        Returns:
            Path to created config file

        Raises:
            FileExistsError: If config already exists
        """
        if self.config_file.exists():
            raise FileExistsError(
                f"Configuration already exists: {self.config_file}\n"
                "Remove it first or use --force to overwrite"
            )

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(self.get_default_config())

        return self.config_file
