"""Tests for JSON registry schemas and the registry builder."""

import json

import pytest
from pydantic import ValidationError

from paramregistry import (
    ChoiceValidator,
    Importance,
    LifecycleState,
    RangeValidator,
    Settable,
    StringValidator,
    ValueType,
)
from paramregistry.exceptions import DeclarationError, SchemaError, StructuralError
from paramregistry.schema import ParameterSpec, RegistrySchema, build_registry

SCHEMA = {
    "name": "Options",
    "sources": ["from_file", "from_cmdline", "dynamic"],
    "parameters": [
        {"key": "HOST", "name": "host", "type": "string", "default": "localhost", "settable": "dynamic"},
        {
            "key": "PORT",
            "name": "port",
            "type": "integer",
            "default": 5555,
            "minimum": 1024,
            "maximum": 65535,
            "importance": "required",
        },
        {"key": "DEBUG", "name": "debug", "type": "boolean", "default": True, "settable": "dynamic"},
        {"key": "RELEASE", "name": "release", "type": "string", "choices": ["alpha", "beta"]},
    ],
}


@pytest.fixture
def schema_file(temp_dir):
    """Write SCHEMA to a JSON file."""
    path = temp_dir / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path


class TestParameterSpec:
    """Test ParameterSpec validation."""

    @pytest.mark.unit
    def test_defaults(self):
        spec = ParameterSpec(key="PORT", name="port", type="integer")
        assert spec.type is ValueType.INTEGER
        assert spec.settable is Settable.STATIC
        assert spec.importance is Importance.OPTIONAL
        assert spec.default is None

    @pytest.mark.unit
    def test_bounds_need_numeric_type(self):
        with pytest.raises(ValidationError, match="numeric type"):
            ParameterSpec(key="HOST", name="host", type="string", minimum=1)

    @pytest.mark.unit
    def test_choices_need_string_type(self):
        with pytest.raises(ValidationError, match="choices need type 'string'"):
            ParameterSpec(key="PORT", name="port", type="integer", choices=["1"])

    @pytest.mark.unit
    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            ParameterSpec(key="PORT", name="port", type="decimal")

    @pytest.mark.unit
    def test_key_must_be_identifier(self):
        with pytest.raises(ValidationError):
            ParameterSpec(key="1PORT", name="port", type="integer")

    @pytest.mark.unit
    def test_make_validator(self):
        assert isinstance(ParameterSpec(key="A", name="a", type="string").make_validator(), StringValidator)
        numeric = ParameterSpec(key="B", name="b", type="short", maximum=10).make_validator()
        assert isinstance(numeric, RangeValidator)
        assert numeric.maximum == 10
        choice = ParameterSpec(key="C", name="c", type="string", choices=["x"]).make_validator()
        assert isinstance(choice, ChoiceValidator)

    @pytest.mark.unit
    def test_each_call_builds_fresh_validator(self):
        spec = ParameterSpec(key="A", name="a", type="string")
        assert spec.make_validator() is not spec.make_validator()


class TestRegistrySchema:
    """Test RegistrySchema validation and file loading."""

    @pytest.mark.unit
    def test_needs_parameters(self):
        with pytest.raises(ValidationError):
            RegistrySchema(parameters=[])

    @pytest.mark.unit
    def test_duplicate_keys(self):
        with pytest.raises(ValidationError, match="duplicate key PORT"):
            RegistrySchema(
                parameters=[
                    {"key": "PORT", "name": "a", "type": "integer"},
                    {"key": "PORT", "name": "b", "type": "integer"},
                ]
            )

    @pytest.mark.unit
    def test_default_name(self):
        schema = RegistrySchema(parameters=[{"key": "A", "name": "a", "type": "string"}])
        assert schema.name == "Parameters"
        assert schema.sources == []

    @pytest.mark.integration
    def test_from_json_file(self, schema_file):
        schema = RegistrySchema.from_json_file(schema_file)
        assert schema.name == "Options"
        assert [p.key for p in schema.parameters] == ["HOST", "PORT", "DEBUG", "RELEASE"]
        assert schema.parameters[2].default is True
        assert schema.parameters[1].default == 5555

    @pytest.mark.integration
    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            RegistrySchema.from_json_file(temp_dir / "missing.json")

    @pytest.mark.integration
    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.json"
        path.write_text("  \n", encoding="utf-8")
        with pytest.raises(SchemaError, match="file is empty"):
            RegistrySchema.from_json_file(path)

    @pytest.mark.integration
    def test_malformed_json(self, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaError, match="invalid JSON"):
            RegistrySchema.from_json_file(path)

    @pytest.mark.integration
    def test_invalid_field_reported(self, temp_dir):
        path = temp_dir / "bad_type.json"
        path.write_text(
            json.dumps({"parameters": [{"key": "PORT", "name": "port", "type": "decimal"}]}),
            encoding="utf-8",
        )
        with pytest.raises(SchemaError) as exc_info:
            RegistrySchema.from_json_file(path)
        assert exc_info.value.field == "parameters.0.type"
        assert "Valid types" in exc_info.value.recovery_hint


class TestBuildRegistry:
    """Test build_registry."""

    @pytest.mark.integration
    def test_builds_initialized_registry(self, schema_file):
        registry = build_registry(RegistrySchema.from_json_file(schema_file))

        assert registry.state is LifecycleState.INITIALIZED
        assert registry.key_type.__name__ == "Options"
        assert registry.sources.file and registry.sources.cmdline and registry.sources.dynamic
        port = registry.lookup("port")
        assert port.name == "PORT"
        assert registry.get(port) == 5555

    @pytest.mark.integration
    def test_unset_default(self, schema_file):
        registry = build_registry(RegistrySchema.from_json_file(schema_file))
        release = registry.key_type["RELEASE"]
        assert release in registry
        with pytest.raises(LookupError):
            registry.get(release)
        registry.load_from_file({"release": "beta"})
        assert registry.get(release) == "beta"

    @pytest.mark.unit
    def test_invalid_default(self):
        schema = RegistrySchema(
            parameters=[{"key": "PORT", "name": "port", "type": "integer", "default": 1, "minimum": 1024}]
        )
        with pytest.raises(DeclarationError, match="invalid default"):
            build_registry(schema)

    @pytest.mark.unit
    def test_default_of_wrong_type(self):
        schema = RegistrySchema(
            parameters=[{"key": "PORT", "name": "port", "type": "integer", "default": "5555"}]
        )
        with pytest.raises(DeclarationError, match="type mismatch"):
            build_registry(schema)

    @pytest.mark.unit
    def test_duplicate_source(self):
        schema = RegistrySchema(
            sources=["dynamic", "dynamic"], parameters=[{"key": "A", "name": "a", "type": "string"}]
        )
        with pytest.raises(StructuralError):
            build_registry(schema)

    @pytest.mark.unit
    def test_duplicate_external_name(self):
        schema = RegistrySchema(
            parameters=[
                {"key": "A", "name": "same", "type": "string"},
                {"key": "B", "name": "same", "type": "string"},
            ]
        )
        with pytest.raises(DeclarationError, match="already used by A"):
            build_registry(schema)
