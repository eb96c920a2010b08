"""
Java code generator implementation.

Generates immutable model classes with step builders, enums, and the
model provider that lists every generated class.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import NamingCase
from ...core.schema import EnumType, Field, Model, SchemaModel
from .annotations import (
    IDENTITY_ERROR,
    field_annotations,
    java_string_literal,
    model_annotations,
)
from .config import (
    BUILD_STEP_NAME,
    CLASS_IMPORT_PACKAGES,
    LOADER_IMPORT_PACKAGES,
)
from .naming import create_java_sanitizer
from .steps import BuilderPlan, plan_step_builder
from .types import ImportAccumulator, JavaTypeMapper

logger = get_logger(__name__)

VERSION_CONSTANT = "AMPLIFY_MODEL_VERSION"


def compute_version(schema: SchemaModel) -> str:
    """
    Content hash of every model in the schema.

    Any change to a model name, field order, field type, nullability or
    directive changes the result. Enums are not part of the hash.
    """
    payload = json.dumps(
        [model.to_dict() for model in schema.models.values()],
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


class JavaGenerator(CodeGenerator):
    """Code generator for Java model classes, enums and the model provider."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)
        self.sanitizer = create_java_sanitizer()
        self.scalar_overrides = self.config.custom.get("scalar_overrides") or {}

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def _new_type_mapper(self, schema: SchemaModel) -> JavaTypeMapper:
        self.sanitizer.reset_used_names()
        return JavaTypeMapper(schema, self.sanitizer, self.scalar_overrides)

    # Package header

    def render_package_header(self, imports: Optional[List[str]] = None) -> str:
        context = {"package_name": self.config.package_name, "imports": imports or []}
        return self.render_template("package.java.j2", context)

    # Registry

    def generate_registry(self, schema: SchemaModel) -> str:
        """Render the singleton provider listing every selected model class."""
        mapper = self._new_type_mapper(schema)
        # dict keeps the first occurrence and the schema order
        model_classes = list(
            dict.fromkeys(
                f"{mapper.class_name(model.name)}.class"
                for model in self.get_selected_models(schema).values()
            )
        )
        version = compute_version(schema)
        logger.debug("Model version %s for %d models", version, len(schema.models))

        context = {
            "add_comments": self.config.add_comments,
            "loader_class_name": self.config.loader_class_name,
            "version_constant": VERSION_CONSTANT,
            "version_literal": java_string_literal(version),
            "model_classes": model_classes,
        }
        return "\n".join(
            [
                self.render_package_header(LOADER_IMPORT_PACKAGES),
                "",
                self.render_template("loader.java.j2", context),
            ]
        )

    # Enums

    def generate_enums(self, schema: SchemaModel) -> str:
        """Render every selected enum, values in declared order."""
        mapper = self._new_type_mapper(schema)
        result = [self.render_package_header()]
        for enum in self.get_selected_enums(schema).values():
            result.append("")
            result.append(self.generate_enum(enum, mapper))
        return "\n".join(result)

    def generate_enum(self, enum: EnumType, mapper: JavaTypeMapper) -> str:
        if len(set(enum.values)) != len(enum.values):
            raise GeneratorError(f"Enum '{enum.name}' declares a value more than once")

        logger.debug("Emitting enum %s", enum.name)
        context = {
            "description": "Auto generated enum from GraphQL schema." if self.config.add_comments else None,
            "enum_name": mapper.class_name(enum.name),
            "values": list(enum.values),
        }
        return self.render_template("enum.java.j2", context)

    # Classes

    def generate_classes(self, schema: SchemaModel) -> str:
        """Render every selected model under one package header."""
        mapper = self._new_type_mapper(schema)
        pass_imports = ImportAccumulator()
        declarations = []

        for model in self.get_selected_models(schema).values():
            declaration, imports = self.generate_class(model, mapper)
            declarations.append(declaration)
            pass_imports.merge(imports)

        header_imports = [i for i in pass_imports.drain() if i not in CLASS_IMPORT_PACKAGES]
        if header_imports:
            header_imports.append("")
        header_imports.extend(CLASS_IMPORT_PACKAGES)

        parts = [self.render_package_header(header_imports)]
        for declaration in declarations:
            parts.append("")
            parts.append(declaration)
        return "\n".join(parts)

    def generate_class(
        self, model: Model, mapper: JavaTypeMapper
    ) -> Tuple[str, ImportAccumulator]:
        """
        Render one model class.

        Returns the declaration and the imports its member types need.
        """
        identity = model.identity_field
        if identity is None:
            raise GeneratorError(f"Model '{model.name}' has no 'id' field")

        logger.debug("Emitting class %s (%d fields)", model.name, len(model.fields))
        imports = ImportAccumulator()
        class_name = mapper.class_name(model.name)

        fields = [self._field_context(f, mapper, imports) for f in model.fields]
        by_name = {f.name: ctx for f, ctx in zip(model.fields, fields)}

        plan = plan_step_builder(
            model,
            key=lambda f: mapper.step_interface_name(f.name),
            reserved={mapper.step_interface_name(BUILD_STEP_NAME)},
        )

        member_names = [ctx["member_name"] for ctx in fields]
        for member_name in member_names:
            if member_names.count(member_name) > 1:
                raise GeneratorError(
                    f"Model '{model.name}' has several fields named '{member_name}' in Java"
                )

        context = {
            "description": (
                f"This is an auto generated class representing the {model.name} type in your schema."
                if self.config.add_comments
                else None
            ),
            "annotations": model_annotations(model),
            "class_name": class_name,
            "instance_name": mapper.sanitizer.convert(model.name, NamingCase.CAMEL_CASE),
            "fields": fields,
            **self._builder_context(plan, by_name, mapper),
            "identity": self._identity_context(by_name[identity.name]),
        }
        return self.render_template("model.java.j2", context), imports

    def _field_context(
        self, schema_field: Field, mapper: JavaTypeMapper, imports: ImportAccumulator
    ) -> Dict[str, Any]:
        names = mapper.field_names(schema_field, imports)
        return {
            "target_literal": java_string_literal(schema_field.name),
            "member_name": names.member_name,
            "getter_name": names.getter_name,
            "step_method_name": names.step_method_name,
            "query_field_name": names.query_field_name,
            "type": names.type_name,
            "annotations": field_annotations(schema_field),
        }

    def _builder_context(
        self, plan: BuilderPlan, by_name: Dict[str, Dict[str, Any]], mapper: JavaTypeMapper
    ) -> Dict[str, Any]:
        build_interface = mapper.step_interface_name(BUILD_STEP_NAME)

        steps = []
        for step in plan.steps:
            field_ctx = by_name[step.item.name]
            steps.append(
                {
                    "interface_name": mapper.step_interface_name(step.item.name),
                    "return_type": (
                        build_interface
                        if step.is_last
                        else mapper.step_interface_name(step.next_item.name)
                    ),
                    "method_name": field_ctx["step_method_name"],
                    "argument_type": field_ctx["type"],
                    "argument_name": field_ctx["member_name"],
                    "member_name": field_ctx["member_name"],
                }
            )

        setters = []
        for optional_field in plan.build.optional_fields:
            field_ctx = by_name[optional_field.name]
            setters.append(
                {
                    "method_name": field_ctx["step_method_name"],
                    "argument_type": field_ctx["type"],
                    "argument_name": field_ctx["member_name"],
                    "member_name": field_ctx["member_name"],
                }
            )

        entry_type = steps[0]["interface_name"] if steps else build_interface
        return {
            "steps": steps,
            "build_step": {"interface_name": build_interface, "setters": setters},
            "builder": {
                "implements": [s["interface_name"] for s in steps] + [build_interface],
                "slots": [
                    {"name": by_name[f.name]["member_name"], "type": by_name[f.name]["type"]}
                    for f in plan.slots
                ],
                "entry_type": entry_type,
            },
        }

    def _identity_context(self, field_ctx: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "method_name": field_ctx["step_method_name"],
            "member_name": field_ctx["member_name"],
            "argument_name": field_ctx["member_name"],
            "type": field_ctx["type"],
            "exception_type": IDENTITY_ERROR.exception_type,
            "message_literal": java_string_literal(IDENTITY_ERROR.message),
            "suggestion_literal": java_string_literal(IDENTITY_ERROR.recovery_suggestion),
            "fatal_literal": "true" if IDENTITY_ERROR.fatal else "false",
        }

    def validate_schema(self, schema: SchemaModel) -> List[str]:
        """Add Java-specific warnings to the base checks."""
        warnings = super().validate_schema(schema)
        mapper = JavaTypeMapper(schema, create_java_sanitizer(), self.scalar_overrides)

        for model in schema.models.values():
            class_name = mapper.class_name(model.name)
            if class_name != model.name:
                warnings.append(f"Model {model.name} renamed to {class_name} in Java")

            for schema_field in model.fields:
                resolved = mapper.resolve_type(schema_field)
                known = (
                    schema_field.type in mapper.scalars
                    or schema.is_model(schema_field.type)
                    or schema.is_enum(schema_field.type)
                )
                if not known:
                    warnings.append(
                        f"Unknown type {schema_field.type} for {model.name}.{schema_field.name}, "
                        f"emitted as {resolved.name}"
                    )

        return warnings


def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator from a plain settings dict."""
    return JavaGenerator(load_config("java", custom_config=config))
