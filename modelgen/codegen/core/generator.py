"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig, GENERATE_LOADER
from .schema import SchemaModel, Model, EnumType
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class GenerationMode(Enum):
    """What a single generation pass emits."""

    REGISTRY = "registry"
    ENUMS = "enums"
    CLASSES = "classes"


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def generate(self, schema: SchemaModel, mode: Optional[GenerationMode] = None) -> str:
        """
        Generate one text blob for the schema.

        Dispatches to the registry, enum or class pass.

        Args:
            schema: Schema snapshot for this pass
            mode: Explicit mode; resolved from configuration when omitted

        Returns:
            Generated code as a string
        """
        mode = mode or self.resolve_mode(schema)
        logger.info("Generating %s (%s)", mode.value, self.language_name)

        if mode == GenerationMode.REGISTRY:
            code = self.generate_registry(schema)
        elif mode == GenerationMode.ENUMS:
            code = self.generate_enums(schema)
        else:
            code = self.generate_classes(schema)
        return self.format_code(code)

    def resolve_mode(self, schema: SchemaModel) -> GenerationMode:
        """Pick the pass from ``generate`` and ``selected_type`` settings."""
        if self.config.generate == GENERATE_LOADER:
            return GenerationMode.REGISTRY
        selected = self.config.selected_type
        if selected and schema.is_enum(selected):
            return GenerationMode.ENUMS
        return GenerationMode.CLASSES

    def get_selected_models(self, schema: SchemaModel) -> Dict[str, Model]:
        """Models in scope for this pass, in schema order."""
        selected = self.config.selected_type
        if not selected:
            return dict(schema.models)
        if selected in schema.models:
            return {selected: schema.models[selected]}
        if selected in schema.enums:
            return {}
        raise GeneratorError(f"Selected type '{selected}' is not defined in the schema")

    def get_selected_enums(self, schema: SchemaModel) -> Dict[str, EnumType]:
        """Enums in scope for this pass, in schema order."""
        selected = self.config.selected_type
        if not selected:
            return dict(schema.enums)
        if selected in schema.enums:
            return {selected: schema.enums[selected]}
        if selected in schema.models:
            return {}
        raise GeneratorError(f"Selected type '{selected}' is not defined in the schema")

    @abstractmethod
    def generate_registry(self, schema: SchemaModel) -> str:
        """Generate the declaration listing every generated class."""
        pass

    @abstractmethod
    def generate_enums(self, schema: SchemaModel) -> str:
        """Generate all selected enum declarations."""
        pass

    @abstractmethod
    def generate_classes(self, schema: SchemaModel) -> str:
        """Generate all selected model class declarations."""
        pass

    def validate_schema(self, schema: SchemaModel) -> List[str]:
        """
        Check for structural issues worth reporting.

        Language generators should override this to add language-specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for model in schema.models.values():
            if not model.fields:
                warnings.append(f"Model '{model.name}' has no fields")
            elif model.identity_field is None:
                warnings.append(f"Model '{model.name}' has no 'id' field")

        for enum in schema.enums.values():
            if not enum.values:
                warnings.append(f"Enum '{enum.name}' has no values")
            elif len(set(enum.values)) != len(enum.values):
                warnings.append(f"Enum '{enum.name}' has duplicate values")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    schema: SchemaModel,
    mode: Optional[GenerationMode] = None,
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema snapshot to generate code for
        mode: Explicit generation mode, or None to follow the configuration

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        mode = mode or generator.resolve_mode(schema)

        code = generator.generate(schema, mode)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "mode": mode.value,
            "model_count": len(generator.get_selected_models(schema)),
            "enum_count": len(generator.get_selected_enums(schema)),
            "package_name": generator.config.package_name,
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
