"""Shared fixtures: small normalized schema documents and generators."""

import copy

import pytest

from modelgen.codegen.core.config import load_config
from modelgen.codegen.core.schema import convert_schema_document
from modelgen.codegen.languages.java import JavaGenerator


def _field(name, type_name, nullable=True, is_list=False, directives=None):
    return {
        "name": name,
        "type": type_name,
        "isNullable": nullable,
        "isList": is_list,
        "directives": directives or [],
    }


BLOG_DOCUMENT = {
    "models": [
        {
            "name": "Post",
            "fields": [
                _field("id", "ID", nullable=False),
                _field("title", "String", nullable=False),
                _field("content", "String"),
                _field("createdAt", "AWSDateTime"),
                _field("status", "Status"),
            ],
            "directives": [
                {"name": "model", "arguments": {}},
                {"name": "key", "arguments": {"name": "byTitle", "fields": ["title", "createdAt"]}},
            ],
        },
        {
            "name": "Comment",
            "fields": [
                _field("id", "ID", nullable=False),
                _field("postId", "ID", nullable=False),
                _field("text", "String", nullable=False),
                _field(
                    "post",
                    "Post",
                    directives=[{"name": "connection", "arguments": {"fields": ["postId"]}}],
                ),
            ],
            "directives": [{"name": "model", "arguments": {}}],
        },
        {
            "name": "Note",
            "fields": [
                _field("id", "ID", nullable=False),
                _field("body", "String"),
                _field("tags", "String", is_list=True),
            ],
            "directives": [{"name": "model", "arguments": {}}],
        },
    ],
    "enums": [
        {"name": "Status", "values": ["DRAFT", "PUBLISHED", "ARCHIVED"]},
    ],
}


@pytest.fixture
def blog_document():
    """Mutable copy of the sample document."""
    return copy.deepcopy(BLOG_DOCUMENT)


@pytest.fixture
def blog_schema(blog_document):
    return convert_schema_document(blog_document)


@pytest.fixture
def java_generator():
    return JavaGenerator(load_config("java"))


@pytest.fixture
def make_generator():
    """Build a Java generator with config overrides."""

    def _make(**overrides):
        return JavaGenerator(load_config("java", custom_config=overrides))

    return _make
