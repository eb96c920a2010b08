"""Tests for schema document loading."""

import json

import pytest
import requests

from modelgen.utils import (
    SchemaLoaderError,
    load_schema,
    load_schema_from_file,
    load_schema_from_url,
)


class FakeResponse:
    def __init__(self, payload, status_code=200, content_type="application/json"):
        self._payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class TestLoadFromFile:
    def test_loads_document(self, tmp_path, blog_document):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(blog_document))
        source, data = load_schema_from_file(path)
        assert source == str(path)
        assert data["models"][0]["name"] == "Post"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{")
        with pytest.raises(SchemaLoaderError, match="Invalid JSON"):
            load_schema_from_file(path)

    def test_scalar_document_is_rejected(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("42")
        with pytest.raises(SchemaLoaderError):
            load_schema_from_file(path)


class TestLoadFromUrl:
    def test_loads_document(self, monkeypatch, blog_document):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(blog_document))
        source, data = load_schema_from_url("https://example.com/schema.json")
        assert source == "https://example.com/schema.json"
        assert data == blog_document

    def test_invalid_url(self):
        with pytest.raises(SchemaLoaderError, match="Invalid URL"):
            load_schema_from_url("not a url")

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({}, status_code=404))
        with pytest.raises(SchemaLoaderError, match="404"):
            load_schema_from_url("https://example.com/schema.json")

    def test_timeout(self, monkeypatch):
        def raise_timeout(url, timeout):
            raise requests.exceptions.Timeout()

        monkeypatch.setattr(requests, "get", raise_timeout)
        with pytest.raises(SchemaLoaderError, match="timeout"):
            load_schema_from_url("https://example.com/schema.json")


class TestLoadSchema:
    def test_requires_a_source(self):
        with pytest.raises(SchemaLoaderError):
            load_schema()

    def test_rejects_both_sources(self, tmp_path):
        with pytest.raises(SchemaLoaderError):
            load_schema(file_path=tmp_path / "a.json", url="https://example.com/a.json")
