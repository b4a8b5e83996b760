"""
Tests for module description and option models (models/)
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from serverless_di.exceptions import ConfigurationError
from serverless_di.models import (
    Datasources,
    ModuleDescription,
    PutAllOptions,
    ReturnConsumedCapacity,
    TableDescriptor,
    TableOptions,
)


class TestModuleDescription:

    def test_defaults_are_empty(self):
        module = ModuleDescription()

        assert module.declarations == []
        assert module.providers == []
        assert len(module.datasources) == 0
        assert module.environment == []

    def test_coerce_mapping(self):
        module = ModuleDescription.coerce({
            "environment": ["STAGE"],
            "datasources": {"dynamoDB": [{"name": "orders", "region": "us-east-1"}]},
        })

        assert module.environment == ["STAGE"]
        assert module.datasources.dynamodb == [TableDescriptor(name="orders", region="us-east-1")]

    def test_coerce_returns_same_instance(self):
        module = ModuleDescription()

        assert ModuleDescription.coerce(module) is module

    def test_coerce_reports_malformed_mapping(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ModuleDescription.coerce({"environment": "STAGE", "datasources": {"dynamoDB": [{"name": "orders"}]}})

        message = str(exc_info.value)
        assert message.startswith("Invalid module description: ")
        assert "environment: " in message
        assert "datasources.dynamoDB.0.region: Field required" in message
        assert isinstance(exc_info.value.original_error, PydanticValidationError)

    def test_unknown_fields_are_kept_as_extras(self):
        module = ModuleDescription.coerce({"providers": [], "imports": ["other"]})

        assert dict(module.properties())["imports"] == ["other"]
        assert [name for name, _ in module.properties()] == [
            "declarations", "providers", "datasources", "environment", "imports"
        ]

    def test_table_descriptor_requires_name_and_region(self):
        with pytest.raises(PydanticValidationError):
            TableDescriptor(name="orders")
        with pytest.raises(PydanticValidationError):
            TableDescriptor(name="", region="us-east-1")

    def test_datasources_accepts_field_name(self):
        datasources = Datasources(dynamodb=[{"name": "orders", "region": "us-east-1"}])

        assert len(datasources) == 1


class TestOptions:

    def test_table_options_always_complete(self):
        options = TableOptions(strict=True)

        assert options.model_dump() == {
            "strict": True,
            "return_consumed_capacity": "TOTAL",
            "return_item_collection_metrics": "NONE",
            "return_values": "ALL_NEW",
        }

    def test_table_options_reject_unknown_enum(self):
        with pytest.raises(PydanticValidationError):
            TableOptions(return_values="EVERYTHING")

    def test_resolve_prefers_explicit_values(self):
        defaults = TableOptions(strict=True, return_consumed_capacity=ReturnConsumedCapacity.INDEXES)

        effective = PutAllOptions(strict=False).resolve(defaults)

        assert effective.strict is False
        assert effective.return_consumed_capacity == "INDEXES"
        assert defaults.strict is True

    def test_resolve_without_overrides(self):
        defaults = TableOptions()

        assert PutAllOptions().resolve(defaults) == defaults
