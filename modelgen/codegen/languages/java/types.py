"""
Java-specific type system for code generation.

Maps schema fields to Java member names, accessor names and types,
collecting the extra imports that shortened type names require.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...core.naming import NameSanitizer, NamingCase
from ...core.schema import Field, SchemaModel
from .config import JAVA_SCALAR_MAP
from .naming import create_java_sanitizer


class ImportAccumulator:
    """
    Ordered set of qualified type names found while emitting members.

    One accumulator belongs to one class emission; the class pass merges
    them when it renders the package header.
    """

    def __init__(self):
        self._imports: Dict[str, None] = {}

    def add(self, qualified_name: str):
        self._imports.setdefault(qualified_name, None)

    def merge(self, other: "ImportAccumulator"):
        for name in other:
            self.add(name)

    def drain(self) -> List[str]:
        """Return the collected names and empty the accumulator."""
        names = list(self._imports)
        self._imports.clear()
        return names

    def __iter__(self):
        return iter(list(self._imports))

    def __len__(self) -> int:
        return len(self._imports)

    def __contains__(self, name: str) -> bool:
        return name in self._imports


@dataclass(frozen=True)
class JavaType:
    """
    Java type as referenced in generated source.

    ``name`` is what appears in declarations; ``qualified_name`` is set when
    the simple name needs an import.
    """

    name: str
    qualified_name: Optional[str] = field(default=None)

    @property
    def needs_import(self) -> bool:
        return self.qualified_name is not None

    def as_list(self) -> "JavaType":
        return JavaType(name=f"List<{self.name}>", qualified_name=self.qualified_name)


@dataclass(frozen=True)
class FieldNames:
    """Every identifier derived from one schema field."""

    member_name: str
    getter_name: str
    step_method_name: str
    query_field_name: str
    type_name: str


class JavaTypeMapper:
    """
    Central engine for mapping schema fields to Java names and types.

    The mapper is deterministic: one field always yields the same names.
    The only side effect is registering qualified types in the accumulator
    passed to ``map_field_type``.
    """

    def __init__(
        self,
        schema: SchemaModel,
        sanitizer: Optional[NameSanitizer] = None,
        scalar_overrides: Optional[Dict[str, str]] = None,
    ):
        self.schema = schema
        self.sanitizer = sanitizer or create_java_sanitizer()
        self.scalars = dict(JAVA_SCALAR_MAP)
        if scalar_overrides:
            self.scalars.update(scalar_overrides)

    def class_name(self, type_name: str) -> str:
        """Generated class name for a model or enum."""
        return self.sanitizer.sanitize_name(type_name, NamingCase.PASCAL_CASE)

    def member_name(self, schema_field: Field) -> str:
        return self.sanitizer.convert(schema_field.name, NamingCase.CAMEL_CASE)

    def getter_name(self, schema_field: Field) -> str:
        pascal = self.sanitizer.convert(schema_field.name, NamingCase.PASCAL_CASE, "")
        return f"get{pascal}"

    def step_method_name(self, schema_field: Field) -> str:
        return self.member_name(schema_field)

    def query_field_name(self, schema_field: Field) -> str:
        return self.sanitizer.convert(schema_field.name, NamingCase.SCREAMING_SNAKE)

    def step_interface_name(self, name: str) -> str:
        """Interface name for the step that sets ``name`` (or the Build step)."""
        pascal = self.sanitizer.convert(name, NamingCase.PASCAL_CASE, "")
        return f"I{pascal}Step"

    def resolve_type(self, schema_field: Field) -> JavaType:
        """Resolve a field's declared type without touching any accumulator."""
        type_name = schema_field.type
        if type_name in self.scalars:
            native = self.scalars[type_name]
        elif self.schema.is_model(type_name) or self.schema.is_enum(type_name):
            native = self.class_name(type_name)
        else:
            native = type_name

        if "." in native:
            java_type = JavaType(name=native.rsplit(".", 1)[-1], qualified_name=native)
        else:
            java_type = JavaType(name=native)

        return java_type.as_list() if schema_field.is_list else java_type

    def map_field_type(self, schema_field: Field, imports: ImportAccumulator) -> str:
        """
        Return the Java type name for a field.

        Qualified names are registered in ``imports`` and shortened to their
        simple name.
        """
        java_type = self.resolve_type(schema_field)
        if java_type.needs_import:
            imports.add(java_type.qualified_name)
        return java_type.name

    def field_names(self, schema_field: Field, imports: ImportAccumulator) -> FieldNames:
        return FieldNames(
            member_name=self.member_name(schema_field),
            getter_name=self.getter_name(schema_field),
            step_method_name=self.step_method_name(schema_field),
            query_field_name=self.query_field_name(schema_field),
            type_name=self.map_field_type(schema_field, imports),
        )
