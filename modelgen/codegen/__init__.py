"""
Model Code Generation Module

Generates source code for data models from a normalized schema model.
"""

from typing import Any, Dict, Optional

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GenerationMode,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import (
    Directive,
    EnumType,
    Field,
    Model,
    SchemaModel,
    convert_schema_document,
)
from .core.config import GeneratorConfig, ConfigManager, load_config

__version__ = "0.1.0"


def generate_from_document(
    document: Dict[str, Any],
    language: str = "java",
    config=None,
    mode: Optional[GenerationMode] = None,
) -> GenerationResult:
    """
    Generate code from a schema document.

    Args:
        document: Parsed normalized schema document
        language: Target language name
        config: Generator configuration dict, GeneratorConfig or path
        mode: Explicit generation mode; follows the configuration when None

    Returns:
        GenerationResult with generated code
    """
    schema = convert_schema_document(document)
    generator = get_generator(language, config)
    return generate_code(generator, schema, mode)


def quick_generate(document: Dict[str, Any], language: str = "java", **options) -> str:
    """
    Quick code generation from a schema document.

    Raises:
        GeneratorError: If generation fails
    """
    result = generate_from_document(document, language, options)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationMode",
    "GenerationResult",
    "GeneratorError",
    "Directive",
    "EnumType",
    "Field",
    "Model",
    "SchemaModel",
    "GeneratorConfig",
    "ConfigManager",
    "convert_schema_document",
    "generate_code",
    "generate_from_document",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
