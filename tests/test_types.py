"""Tests for Java type mapping and import collection."""

from modelgen.codegen.core.schema import Field
from modelgen.codegen.languages.java import ImportAccumulator, JavaTypeMapper


class TestResolveType:
    def test_scalars(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        assert mapper.map_field_type(Field("id", "ID"), imports) == "String"
        assert mapper.map_field_type(Field("count", "Int"), imports) == "Integer"
        assert mapper.map_field_type(Field("at", "AWSTimestamp"), imports) == "Long"
        assert len(imports) == 0

    def test_qualified_type_is_shortened_and_imported(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        assert mapper.map_field_type(Field("createdAt", "AWSDateTime"), imports) == "Date"
        assert "java.util.Date" in imports

    def test_unqualified_type_adds_nothing(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        mapper.map_field_type(Field("title", "String"), imports)
        assert list(imports) == []

    def test_model_and_enum_names(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        assert mapper.map_field_type(Field("post", "Post"), imports) == "Post"
        assert mapper.map_field_type(Field("status", "Status"), imports) == "Status"

    def test_unknown_type_passes_through(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        assert mapper.map_field_type(Field("geo", "com.example.Point"), imports) == "Point"
        assert list(imports) == ["com.example.Point"]

    def test_list_wraps_element_and_imports_element(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        imports = ImportAccumulator()
        times = Field("times", "AWSTime", is_list=True)
        assert mapper.map_field_type(times, imports) == "List<Time>"
        assert list(imports) == ["java.sql.Time"]

    def test_scalar_overrides(self, blog_schema):
        mapper = JavaTypeMapper(
            blog_schema, scalar_overrides={"AWSDateTime": "java.time.OffsetDateTime"}
        )
        imports = ImportAccumulator()
        assert mapper.map_field_type(Field("at", "AWSDateTime"), imports) == "OffsetDateTime"
        assert list(imports) == ["java.time.OffsetDateTime"]


class TestFieldNames:
    def test_derived_names(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        names = mapper.field_names(Field("createdAt", "AWSDateTime"), ImportAccumulator())
        assert names.member_name == "createdAt"
        assert names.getter_name == "getCreatedAt"
        assert names.step_method_name == "createdAt"
        assert names.query_field_name == "CREATED_AT"
        assert names.type_name == "Date"

    def test_step_interface_name(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        assert mapper.step_interface_name("postId") == "IPostIdStep"
        assert mapper.step_interface_name("Build") == "IBuildStep"

    def test_mapping_is_deterministic(self, blog_schema):
        mapper = JavaTypeMapper(blog_schema)
        field = Field("title", "String")
        first = mapper.field_names(field, ImportAccumulator())
        second = mapper.field_names(field, ImportAccumulator())
        assert first == second


class TestImportAccumulator:
    def test_keeps_first_insertion_order(self):
        imports = ImportAccumulator()
        imports.add("java.util.Date")
        imports.add("java.sql.Time")
        imports.add("java.util.Date")
        assert list(imports) == ["java.util.Date", "java.sql.Time"]

    def test_drain_empties(self):
        imports = ImportAccumulator()
        imports.add("java.util.Date")
        assert imports.drain() == ["java.util.Date"]
        assert len(imports) == 0

    def test_merge(self):
        first, second = ImportAccumulator(), ImportAccumulator()
        first.add("a.A")
        second.add("b.B")
        second.add("a.A")
        first.merge(second)
        assert list(first) == ["a.A", "b.B"]
