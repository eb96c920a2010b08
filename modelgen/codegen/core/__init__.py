"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationMode,
    GenerationResult,
    generate_code,
)
from .schema import (
    Directive,
    EnumType,
    Field,
    Model,
    SchemaError,
    SchemaModel,
    convert_schema_document,
)
from .naming import NameSanitizer, NamingCase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationMode",
    "GenerationResult",
    "generate_code",
    # Schema model - core data structures
    "Directive",
    "EnumType",
    "Field",
    "Model",
    "SchemaError",
    "SchemaModel",
    "convert_schema_document",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
