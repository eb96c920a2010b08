"""Tests for the naming module."""

from modelgen.codegen.core.naming import (
    NamingCase,
    to_camel_case,
    to_constant_case,
    to_pascal_case,
    to_snake_case,
)
from modelgen.codegen.languages.java import create_java_sanitizer


class TestCaseConversion:
    def test_snake_from_camel(self):
        assert to_snake_case("postId") == "post_id"

    def test_snake_keeps_acronyms_together(self):
        assert to_snake_case("URLField") == "url_field"

    def test_camel(self):
        assert to_camel_case("created_at") == "createdAt"
        assert to_camel_case("createdAt") == "createdAt"

    def test_pascal(self):
        assert to_pascal_case("post_id") == "PostId"
        assert to_pascal_case("blogPost") == "BlogPost"

    def test_constant(self):
        assert to_constant_case("createdAt") == "CREATED_AT"


class TestJavaSanitizer:
    def test_reserved_member_gets_suffix(self):
        sanitizer = create_java_sanitizer()
        assert sanitizer.convert("class", NamingCase.CAMEL_CASE) == "class_"

    def test_convert_does_not_track_names(self):
        sanitizer = create_java_sanitizer()
        assert sanitizer.convert("title", NamingCase.CAMEL_CASE) == "title"
        assert sanitizer.convert("title", NamingCase.CAMEL_CASE) == "title"

    def test_sanitize_name_is_stable_for_same_input(self):
        sanitizer = create_java_sanitizer()
        assert sanitizer.sanitize_name("blogPost") == "BlogPost"
        assert sanitizer.sanitize_name("blogPost") == "BlogPost"

    def test_sanitize_name_makes_colliding_names_unique(self):
        sanitizer = create_java_sanitizer()
        assert sanitizer.sanitize_name("blog_post") == "BlogPost"
        assert sanitizer.sanitize_name("BlogPost") == "BlogPost_1"

    def test_reset_used_names(self):
        sanitizer = create_java_sanitizer()
        sanitizer.sanitize_name("blog_post")
        sanitizer.reset_used_names()
        assert sanitizer.sanitize_name("BlogPost") == "BlogPost"

    def test_invalid_characters_are_cleaned(self):
        sanitizer = create_java_sanitizer()
        assert sanitizer.convert("first name", NamingCase.CAMEL_CASE) == "firstName"
