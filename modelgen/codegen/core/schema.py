"""
Core schema representation for code generation.

Converts the normalized schema document produced upstream (models, fields,
enums and their directives) into immutable objects that generators can
walk consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any, Union


DirectiveValue = Union[str, int, float, bool, Tuple[str, ...], None]

# The field every model uses as its unique key
IDENTITY_FIELD_NAME = "id"


class SchemaError(ValueError):
    """Raised when a schema document cannot be converted."""

    pass


@dataclass(frozen=True)
class Directive:
    """A named, argument-bearing annotation on a model or field."""

    name: str
    arguments: Dict[str, DirectiveValue] = field(default_factory=dict)

    def get(self, key: str, default: DirectiveValue = None) -> DirectiveValue:
        """Get an argument value by name."""
        return self.arguments.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        arguments = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in self.arguments.items()
        }
        return {"name": self.name, "arguments": arguments}


@dataclass(frozen=True)
class Field:
    """Represents a single field of a model."""

    name: str
    type: str
    is_nullable: bool = True
    is_list: bool = False
    directives: Tuple[Directive, ...] = ()

    @property
    def is_required(self) -> bool:
        return not self.is_nullable

    @property
    def is_identity(self) -> bool:
        return self.name == IDENTITY_FIELD_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "isNullable": self.is_nullable,
            "isList": self.is_list,
            "directives": [d.to_dict() for d in self.directives],
        }


@dataclass(frozen=True)
class Model:
    """Represents one generated data type."""

    name: str
    fields: Tuple[Field, ...] = ()
    directives: Tuple[Directive, ...] = ()

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for model_field in self.fields:
            if model_field.name == name:
                return model_field
        return None

    @property
    def identity_field(self) -> Optional[Field]:
        return self.get_field(IDENTITY_FIELD_NAME)

    @property
    def required_fields(self) -> List[Field]:
        """Non-nullable fields, in declaration order."""
        return [f for f in self.fields if f.is_required]

    @property
    def optional_fields(self) -> List[Field]:
        """Nullable fields, in declaration order."""
        return [f for f in self.fields if not f.is_required]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
            "directives": [d.to_dict() for d in self.directives],
        }


@dataclass(frozen=True)
class EnumType:
    """An enum declared in the schema, values in declaration order."""

    name: str
    values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SchemaModel:
    """Snapshot of everything a single generation pass consumes."""

    models: Dict[str, Model] = field(default_factory=dict)
    enums: Dict[str, EnumType] = field(default_factory=dict)

    def is_model(self, name: str) -> bool:
        return name in self.models

    def is_enum(self, name: str) -> bool:
        return name in self.enums


def _convert_directive(data: Dict[str, Any]) -> Directive:
    if "name" not in data:
        raise SchemaError(f"Directive without a name: {data!r}")

    arguments = {}
    for key, value in (data.get("arguments") or {}).items():
        if isinstance(value, list):
            value = tuple(str(v) for v in value)
        arguments[key] = value

    return Directive(name=data["name"], arguments=arguments)


def _convert_field(data: Dict[str, Any], model_name: str) -> Field:
    try:
        name = data["name"]
        type_name = data["type"]
    except KeyError as e:
        raise SchemaError(f"Field in model '{model_name}' is missing {e}") from e

    return Field(
        name=name,
        type=type_name,
        is_nullable=bool(data.get("isNullable", True)),
        is_list=bool(data.get("isList", False)),
        directives=tuple(_convert_directive(d) for d in data.get("directives", [])),
    )


def convert_schema_document(document: Dict[str, Any]) -> SchemaModel:
    """
    Convert a normalized schema document to a SchemaModel.

    The document has the shape::

        {
          "models": [{"name": ..., "fields": [...], "directives": [...]}],
          "enums": [{"name": ..., "values": [...]}]
        }

    ``models`` and ``enums`` may also be mappings keyed by name. Order is
    preserved in both cases.

    Args:
        document: Parsed schema document

    Returns:
        SchemaModel with models and enums in document order
    """
    if not isinstance(document, dict):
        raise SchemaError("Schema document must be a JSON object")

    raw_models = document.get("models", [])
    if isinstance(raw_models, dict):
        raw_models = [{"name": name, **body} for name, body in raw_models.items()]

    models: Dict[str, Model] = {}
    for raw in raw_models:
        if "name" not in raw:
            raise SchemaError(f"Model without a name: {raw!r}")
        name = raw["name"]
        models[name] = Model(
            name=name,
            fields=tuple(_convert_field(f, name) for f in raw.get("fields", [])),
            directives=tuple(_convert_directive(d) for d in raw.get("directives", [])),
        )

    raw_enums = document.get("enums", [])
    if isinstance(raw_enums, dict):
        raw_enums = [{"name": name, "values": values} for name, values in raw_enums.items()]

    enums: Dict[str, EnumType] = {}
    for raw in raw_enums:
        if "name" not in raw:
            raise SchemaError(f"Enum without a name: {raw!r}")
        values = raw.get("values", [])
        if isinstance(values, dict):
            values = list(values.values())
        enums[raw["name"]] = EnumType(name=raw["name"], values=tuple(values))

    return SchemaModel(models=models, enums=enums)
