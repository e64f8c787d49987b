"""scriptkit runtime configuration and settings."""
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from scriptkit.core.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE = Path.home() / ".config" / "scriptkit" / "config.yml"

# Environment variable for each config field
ENV_VARS = {
    "code_path": "SCRIPTKIT_CODE_PATH",
    "default_type": "SCRIPTKIT_DEFAULT_TYPE",
    "default_repo": "SCRIPTKIT_DEFAULT_REPO",
    "package_manager": "SCRIPTKIT_PACKAGE_MANAGER",
    "commit_message": "SCRIPTKIT_COMMIT_MESSAGE",
}


@dataclass
class ScriptkitConfig:
    """Runtime configuration for scriptkit commands.

    Attributes:
        code_path: Parent directory for new projects (default: ~/code)
        default_type: Project type used when --type is omitted
        default_repo: Repository visibility used when --repo is omitted
        package_manager: Executable used to install dependencies
        commit_message: Message of the initial commit
    """

    code_path: str = field(default_factory=lambda: str(Path.home() / "code"))
    default_type: str = "client-server"
    default_repo: str = "public"
    package_manager: str = "bun"
    commit_message: str = "initial setup with scriptkit new-app"

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> Dict[str, Any]:
        """Read config overrides from a YAML file.

        Returns:
            Mapping of known field names to values (empty if the file is missing)

        Raises:
            ValueError: If the file does not hold a mapping
        """
        path = Path(path) if path else CONFIG_FILE
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys in {path}: {', '.join(sorted(unknown))}")
        return {key: str(value) for key, value in data.items() if key in known}

    @classmethod
    def from_env(cls) -> "ScriptkitConfig":
        """Create config from the config file and environment variables.

        Environment variables:
            SCRIPTKIT_CONFIG: Path of the YAML config file
            SCRIPTKIT_CODE_PATH: Parent directory for new projects
            SCRIPTKIT_DEFAULT_TYPE: Default project type
            SCRIPTKIT_DEFAULT_REPO: Default repository visibility
            SCRIPTKIT_PACKAGE_MANAGER: Dependency installer executable
            SCRIPTKIT_COMMIT_MESSAGE: Initial commit message

        Returns:
            ScriptkitConfig with environment over file over defaults
        """
        config_file = os.environ.get("SCRIPTKIT_CONFIG")
        values = cls.from_file(Path(config_file) if config_file else None)

        for name, env_var in ENV_VARS.items():
            if env_value := os.environ.get(env_var):
                values[name] = env_value

        if "code_path" in values:
            values["code_path"] = str(Path(values["code_path"]).expanduser())

        return cls(**values)


# Global config instance (can be overridden)
_config: Optional[ScriptkitConfig] = None


def get_config() -> ScriptkitConfig:
    """Get the global scriptkit configuration.

    Returns:
        ScriptkitConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = ScriptkitConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
