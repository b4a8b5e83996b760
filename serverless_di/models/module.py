"""
Module description models.

A module is what an application author writes to describe its wiring:

    module = ModuleDescription(
        declarations=[OrdersHandler, OrdersController],
        providers=[Clock, {"provide": Mailer, "use_value": SesMailer}],
        datasources={"dynamoDB": [{"name": "orders", "region": "eu-west-1"}]},
        environment=["STAGE"],
    )

Fields outside the known set are kept as extras so the registrar can warn
about them instead of failing.
"""

from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError

from .options import TableOptions

KNOWN_PROPERTIES = ("declarations", "providers", "datasources", "environment")


class TableDescriptor(BaseModel):
    """One DynamoDB table an application reads or writes."""

    name: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    primary_keys: List[str] = Field(default_factory=list, alias="primaryKeys")
    options: Optional[TableOptions] = None

    model_config = ConfigDict(populate_by_name=True)


class Datasources(BaseModel):
    """Declared external tables, grouped by store."""

    dynamodb: List[TableDescriptor] = Field(default_factory=list, alias="dynamoDB")

    model_config = ConfigDict(populate_by_name=True)

    def __len__(self) -> int:
        return len(self.dynamodb)


class ProviderPair(BaseModel):
    """Explicit ``{provide, use_value}`` override.

    Both fields are optional here; the registrar reports a missing one as a
    configuration error.
    """

    provide: Any = None
    use_value: Any = Field(None, alias="useValue")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


class ModuleDescription(BaseModel):
    """Handlers, controllers, providers, datasources and environment of one module."""

    declarations: List[Any] = Field(default_factory=list)
    providers: List[Any] = Field(default_factory=list)
    datasources: Datasources = Field(default_factory=Datasources)
    environment: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra='allow', arbitrary_types_allowed=True)

    @classmethod
    def coerce(cls, module: Union['ModuleDescription', Mapping[str, Any]]) -> 'ModuleDescription':
        """Accept either a model instance or a plain mapping.

        Raises:
            ConfigurationError: The mapping does not describe a valid module
        """
        if isinstance(module, cls):
            return module
        try:
            return cls.model_validate(dict(module))
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid module description: {describe_errors(e)}", original_error=e
            ) from e

    def properties(self):
        """Yield ``(name, value)`` for known fields then extras, in declaration order."""
        for name in KNOWN_PROPERTIES:
            yield name, getattr(self, name)
        for name, value in (self.model_extra or {}).items():
            yield name, value


def describe_errors(error: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``loc: msg`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in error.errors()
    )
