"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, asdict

from ...logging_config import get_logger

logger = get_logger(__name__)

GENERATE_CODE = "code"
GENERATE_LOADER = "loader"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    package_name: str = "com.amplifyframework.datastore.generated.model"
    loader_class_name: str = "AmplifyModelProvider"

    # Scope of one pass
    generate: str = GENERATE_CODE  # code, loader
    selected_type: Optional[str] = None

    # Additional metadata
    add_comments: bool = True

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "package_name": "com.amplifyframework.datastore.generated.model",
            "loader_class_name": "AmplifyModelProvider",
            "generate": GENERATE_CODE,
            "add_comments": True,
            "custom": {
                "scalar_overrides": {},
            },
        }

    def get_config(self, language: str = "java", custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = json.loads(json.dumps(self._configs.get(language, {})))

        if config_file:
            file_config = self._load_config_file(config_file)
            self._merge(base_config, file_config)

        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    @staticmethod
    def _merge(target: Dict[str, Any], overrides: Dict[str, Any]):
        """Merge overrides into target; ``custom`` dicts are merged, not replaced."""
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                target.setdefault("custom", {}).update(value)
            else:
                target[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in configuration file %s: %s", path, e)
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            logger.error("Failed to read configuration file %s: %s", path, e)
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = set(GeneratorConfig.__dataclass_fields__)

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys land in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of supported languages."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, language: str = "java") -> list[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        if config.generate not in {GENERATE_CODE, GENERATE_LOADER}:
            warnings.append(f"Invalid generate mode: {config.generate}")

        if language == "java":
            segments = config.package_name.split(".") if config.package_name else []
            if not segments or not all(s.isidentifier() for s in segments):
                warnings.append(f"Invalid Java package name: {config.package_name}")

            if not config.loader_class_name.isidentifier():
                warnings.append(f"Invalid loader class name: {config.loader_class_name}")

            overrides = config.custom.get("scalar_overrides", {})
            if not isinstance(overrides, dict):
                warnings.append("scalar_overrides must be a mapping of scalar to type name")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "java", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

