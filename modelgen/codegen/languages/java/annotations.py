"""
Directive to annotation mapping for Java models.

Model directives and field directives are translated through fixed
dispatch tables; directive names missing from a table produce nothing.
Annotations are returned without the leading ``@``.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ....logging_config import get_logger
from ...core.schema import Directive, Field, Model

logger = get_logger(__name__)

SUPPRESS_WARNINGS = 'SuppressWarnings("all")'


def java_string_literal(value: object) -> str:
    """Quote a value as a Java string literal."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def java_string_array(values) -> str:
    """Render strings as a Java annotation array: {"a", "b"}."""
    return "{" + ", ".join(java_string_literal(v) for v in values) + "}"


@dataclass(frozen=True)
class ConnectionArguments:
    """Recognized arguments of a ``connection`` directive; absent ones are None."""

    name: Optional[str] = None
    key_field: Optional[str] = None
    sort_field: Optional[str] = None
    key_name: Optional[str] = None
    limit: Optional[int] = None
    fields: Optional[Tuple[str, ...]] = None

    # (annotation argument, attribute), in rendering order
    STRING_ARGUMENTS = (
        ("name", "name"),
        ("keyField", "key_field"),
        ("sortField", "sort_field"),
        ("keyName", "key_name"),
    )

    @classmethod
    def from_directive(cls, directive: Directive) -> "ConnectionArguments":
        values = {}
        for argument, attribute in cls.STRING_ARGUMENTS:
            value = directive.get(argument)
            if isinstance(value, str):
                values[attribute] = value

        # A zero limit means "no limit" and is left out of the annotation
        limit = directive.get("limit")
        if isinstance(limit, (int, float)) and not isinstance(limit, bool) and limit:
            values["limit"] = int(limit)

        fields = directive.get("fields")
        if isinstance(fields, (tuple, list)):
            values["fields"] = tuple(str(f) for f in fields)

        return cls(**values)

    def render_arguments(self) -> List[str]:
        arguments = []
        for argument, attribute in self.STRING_ARGUMENTS:
            value = getattr(self, attribute)
            if value is not None:
                arguments.append(f"{argument} = {java_string_literal(value)}")
        if self.limit is not None:
            arguments.append(f"limit = {self.limit}")
        if self.fields is not None:
            arguments.append(f"fields = {java_string_array(self.fields)}")
        return arguments


@dataclass(frozen=True)
class IdentityErrorReport:
    """
    What the generated identity setter throws for a malformed id.

    The offending value is appended to ``message`` at runtime. ``fatal`` is
    False: a bad id is reported to the caller, never treated as a crash.
    """

    message: str
    recovery_suggestion: str
    exception_type: str = "AmplifyException"
    fatal: bool = False


IDENTITY_ERROR = IdentityErrorReport(
    message="Model IDs must be unique in the format of UUID. Provided ID: ",
    recovery_suggestion=(
        "If you are creating a new object, leave ID blank and one will be auto "
        "generated for you. Otherwise, if you are referencing an existing object, "
        "be sure you are getting the correct id for it."
    ),
)


def _model_config_annotation(model: Model, directive: Directive) -> Optional[str]:
    return f"ModelConfig(targetName = {java_string_literal(model.name)})"


def _index_annotation(model: Model, directive: Directive) -> Optional[str]:
    arguments = []
    name = directive.get("name")
    if isinstance(name, str):
        arguments.append(f"name = {java_string_literal(name)}")
    fields = directive.get("fields")
    if isinstance(fields, (tuple, list)):
        arguments.append(f"fields = {java_string_array(fields)}")
    return f"Index({', '.join(arguments)})"


def _connection_annotation(schema_field: Field, directive: Directive) -> Optional[str]:
    arguments = ConnectionArguments.from_directive(directive).render_arguments()
    if not arguments:
        return None
    return f"Connection({', '.join(arguments)})"


MODEL_DIRECTIVE_HANDLERS: Dict[str, Callable[[Model, Directive], Optional[str]]] = {
    "model": _model_config_annotation,
    "key": _index_annotation,
}

FIELD_DIRECTIVE_HANDLERS: Dict[str, Callable[[Field, Directive], Optional[str]]] = {
    "connection": _connection_annotation,
}


def model_annotations(model: Model) -> List[str]:
    """Class-level annotations, SuppressWarnings first."""
    annotations = [SUPPRESS_WARNINGS]
    for directive in model.directives:
        handler = MODEL_DIRECTIVE_HANDLERS.get(directive.name)
        if handler is None:
            logger.debug("Ignoring directive @%s on model %s", directive.name, model.name)
            continue
        annotation = handler(model, directive)
        if annotation:
            annotations.append(annotation)
    return annotations


def field_metadata_annotation(schema_field: Field) -> str:
    arguments = [
        f"targetName = {java_string_literal(schema_field.name)}",
        f"targetType = {java_string_literal(schema_field.type)}",
    ]
    if schema_field.is_required:
        arguments.append("isRequired = true")
    return f"ModelField({', '.join(arguments)})"


def field_annotations(schema_field: Field) -> List[str]:
    """Member annotations: ModelField always, then directive annotations."""
    annotations = [field_metadata_annotation(schema_field)]
    for directive in schema_field.directives:
        handler = FIELD_DIRECTIVE_HANDLERS.get(directive.name)
        if handler is None:
            logger.debug("Ignoring directive @%s on field %s", directive.name, schema_field.name)
            continue
        annotation = handler(schema_field, directive)
        if annotation:
            annotations.append(annotation)
    return annotations
