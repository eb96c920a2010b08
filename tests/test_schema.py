"""Tests for schema document conversion."""

import pytest

from modelgen.codegen.core.schema import (
    Directive,
    Field,
    Model,
    SchemaError,
    convert_schema_document,
)


class TestConvertSchemaDocument:
    def test_models_keep_document_order(self, blog_schema):
        assert list(blog_schema.models) == ["Post", "Comment", "Note"]

    def test_enum_values_keep_declared_order(self, blog_schema):
        assert blog_schema.enums["Status"].values == ("DRAFT", "PUBLISHED", "ARCHIVED")

    def test_field_flags(self, blog_schema):
        post = blog_schema.models["Post"]
        assert post.get_field("title").is_required
        assert not post.get_field("content").is_required
        assert blog_schema.models["Note"].get_field("tags").is_list

    def test_list_arguments_become_tuples(self, blog_schema):
        key = blog_schema.models["Post"].directives[1]
        assert key.get("fields") == ("title", "createdAt")

    def test_mapping_form(self):
        schema = convert_schema_document(
            {
                "models": {"Todo": {"fields": [{"name": "id", "type": "ID", "isNullable": False}]}},
                "enums": {"Priority": ["LOW", "HIGH"]},
            }
        )
        assert schema.is_model("Todo")
        assert schema.enums["Priority"].values == ("LOW", "HIGH")

    def test_nullable_is_the_default(self):
        schema = convert_schema_document(
            {"models": [{"name": "Todo", "fields": [{"name": "title", "type": "String"}]}]}
        )
        assert schema.models["Todo"].fields[0].is_nullable

    def test_field_without_type_is_rejected(self):
        with pytest.raises(SchemaError, match="Todo"):
            convert_schema_document({"models": [{"name": "Todo", "fields": [{"name": "title"}]}]})

    def test_non_object_document_is_rejected(self):
        with pytest.raises(SchemaError):
            convert_schema_document(["Todo"])


class TestModel:
    def test_identity_field(self):
        model = Model("Todo", fields=(Field("id", "ID", is_nullable=False), Field("title", "String")))
        assert model.identity_field.name == "id"
        assert model.required_fields == [model.fields[0]]
        assert model.optional_fields == [model.fields[1]]

    def test_missing_identity_field(self):
        assert Model("Todo", fields=(Field("title", "String"),)).identity_field is None

    def test_to_dict_includes_directive_arguments(self):
        directive = Directive("key", {"fields": ("a", "b")})
        assert directive.to_dict() == {"name": "key", "arguments": {"fields": ["a", "b"]}}
