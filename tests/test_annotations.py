"""Tests for directive to annotation mapping."""

from modelgen.codegen.core.schema import Directive, Field, Model
from modelgen.codegen.languages.java.annotations import (
    SUPPRESS_WARNINGS,
    ConnectionArguments,
    field_annotations,
    java_string_literal,
    model_annotations,
)


class TestModelAnnotations:
    def test_suppress_warnings_comes_first(self):
        model = Model("Post", directives=(Directive("model"),))
        assert model_annotations(model) == [
            SUPPRESS_WARNINGS,
            'ModelConfig(targetName = "Post")',
        ]

    def test_key_becomes_index(self):
        model = Model(
            "Post",
            directives=(Directive("key", {"name": "byTitle", "fields": ("title", "createdAt")}),),
        )
        assert model_annotations(model)[1] == 'Index(name = "byTitle", fields = {"title", "createdAt"})'

    def test_key_without_name(self):
        model = Model("Post", directives=(Directive("key", {"fields": ("title",)}),))
        assert model_annotations(model)[1] == 'Index(fields = {"title"})'

    def test_unknown_directive_is_dropped(self):
        model = Model("Post", directives=(Directive("auth", {"rules": ("owner",)}),))
        assert model_annotations(model) == [SUPPRESS_WARNINGS]


class TestFieldAnnotations:
    def test_required_field(self):
        field = Field("title", "String", is_nullable=False)
        assert field_annotations(field) == [
            'ModelField(targetName = "title", targetType = "String", isRequired = true)'
        ]

    def test_nullable_field_omits_is_required(self):
        assert field_annotations(Field("content", "String")) == [
            'ModelField(targetName = "content", targetType = "String")'
        ]

    def test_connection_fields_render_as_one_list(self):
        field = Field(
            "post", "Post", directives=(Directive("connection", {"fields": ("postId", "title")}),)
        )
        assert field_annotations(field)[1] == 'Connection(fields = {"postId", "title"})'

    def test_connection_omits_absent_arguments(self):
        field = Field(
            "comments",
            "Comment",
            directives=(Directive("connection", {"name": "PostComments", "limit": 10}),),
        )
        assert field_annotations(field)[1] == 'Connection(name = "PostComments", limit = 10)'

    def test_connection_without_arguments_is_dropped(self):
        field = Field("post", "Post", directives=(Directive("connection"),))
        assert len(field_annotations(field)) == 1

    def test_unknown_field_directive_is_dropped(self):
        field = Field("title", "String", directives=(Directive("aws_subscribe"),))
        assert len(field_annotations(field)) == 1


class TestConnectionArguments:
    def test_render_order(self):
        arguments = ConnectionArguments.from_directive(
            Directive(
                "connection",
                {"keyName": "byPost", "sortField": "createdAt", "keyField": "postId", "name": "C"},
            )
        )
        assert arguments.render_arguments() == [
            'name = "C"',
            'keyField = "postId"',
            'sortField = "createdAt"',
            'keyName = "byPost"',
        ]

    def test_ignores_wrong_types(self):
        arguments = ConnectionArguments.from_directive(
            Directive("connection", {"name": 3, "limit": True})
        )
        assert arguments.render_arguments() == []


def test_java_string_literal_escapes_quotes():
    assert java_string_literal('say "hi"') == '"say \\"hi\\""'


def test_zero_limit_is_omitted():
    arguments = ConnectionArguments.from_directive(
        Directive("connection", {"name": "PostComments", "limit": 0})
    )
    assert arguments.limit is None
    assert arguments.render_arguments() == ['name = "PostComments"']
