"""Tests for descriptor models, runtime table and schema loading."""

# pylint: disable=missing-function-docstring

import pytest

from serverless_predeploy.models import json_schema_loader
from serverless_predeploy.models.descriptor import ServiceDescriptor
from serverless_predeploy.models.runtimes import (
    RUNTIMES_EXTENSIONS,
    get_extensions,
    is_supported_runtime,
    supported_runtimes,
)


class TestRuntimes:
    """Tests for the runtime → extensions table."""

    def test_supported_runtimes_order(self):
        assert supported_runtimes() == ["node8", "node10", "node14", "python", "python3", "golang"]

    def test_node_extensions_try_ts_first(self):
        assert get_extensions("node10") == ["ts", "js"]

    def test_python_extensions(self):
        assert RUNTIMES_EXTENSIONS["python3"] == ["py"]

    @pytest.mark.parametrize("runtime", ["ruby", "node16", "", None, 3])
    def test_unsupported(self, runtime):
        assert get_extensions(runtime) is None
        assert not is_supported_runtime(runtime)


class TestServiceDescriptor:
    """Tests for ServiceDescriptor."""

    def test_from_dict(self):
        data = {
            "provider": {"runtime": "node14", "env": {"KEY": "value"}},
            "functions": {"hello": {"handler": "handler.main"}},
            "custom": {"containers": {"api": {}}},
        }

        descriptor = ServiceDescriptor.from_dict(data, service_path="/srv")

        assert descriptor.service_path == "/srv"
        assert descriptor.runtime == "node14"
        assert descriptor.env == {"KEY": "value"}
        assert descriptor.containers == {"api": {}}

    def test_nested_mappings_are_shared(self):
        functions = {"hello": {"handler": "handler.main"}}

        descriptor = ServiceDescriptor.from_dict({"functions": functions})

        assert descriptor.functions is functions

    def test_missing_sections(self):
        descriptor = ServiceDescriptor.from_dict({})

        assert descriptor.service_path is None
        assert descriptor.runtime is None
        assert descriptor.env is None
        assert descriptor.functions is None
        assert descriptor.containers is None

    def test_custom_without_containers(self):
        descriptor = ServiceDescriptor.from_dict({"custom": {"other": 1}})
        assert descriptor.containers is None


class TestJsonSchemaLoader:
    """Tests for packaged schema loading."""

    def setup_method(self):
        json_schema_loader.clear_cache()

    def test_load_schedule_schema(self):
        schema = json_schema_loader.load_schema("schedule")

        assert schema["required"] == ["rate"]
        assert json_schema_loader.load_schema("schedule") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            json_schema_loader.load_schema("http")
