"""
Binding registrar.

Turns a module description into a binding set: one ``ContainerModule`` per
non-empty category. Registration either completes or raises
``ConfigurationError`` before anything is written to the registry.
"""

import inspect
import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..config import DynamoDBConfig
from ..core.table_client import TableClient
from ..exceptions import ConfigurationError
from ..models import (
    Datasources,
    DeclarationKind,
    ModuleDescription,
    ProviderPair,
    TableDescriptor,
    describe_errors,
    get_declaration,
)
from .container_module import Binding, ContainerModule, Strategy
from .decorators import ensure_injectable
from .keys import datasource_key
from .registry import ControllerKeys, SymbolRegistry

logger = logging.getLogger(__name__)

BindingSet = Dict[str, ContainerModule]


def register_bindings(
    module: Union[ModuleDescription, Mapping[str, Any]],
    registry: Optional[SymbolRegistry] = None,
    config: Optional[DynamoDBConfig] = None,
) -> BindingSet:
    """Build the binding set for ``module``.

    Args:
        module: Module description, or a mapping with the same keys
        registry: Registry receiving handler, controller and environment keys
        config: Connection settings handed to table clients built for datasources

    Returns:
        Mapping of category name to container module

    Raises:
        ConfigurationError: The module is malformed, a declaration is not a
            handler or controller, or a provider pair is incomplete
    """
    description = ModuleDescription.coerce(module)
    registry = registry if registry is not None else SymbolRegistry()
    staged = registry.stage()
    bindings: BindingSet = {}

    for prop, value in description.properties():
        if not value:
            continue
        if prop == 'declarations':
            bindings[prop] = register_declarations(value, staged)
        elif prop == 'providers':
            bindings[prop] = register_providers(value)
        elif prop == 'datasources':
            bindings[prop] = register_datasources(value, config)
        elif prop == 'environment':
            bindings[prop] = register_environment(value, staged)
        else:
            logger.warning(f"{prop!r} is not supported as a property of module, it will be ignored.")

    registry.commit(staged)
    logger.info(f"Registered bindings for: {', '.join(bindings) or 'nothing'}")
    return bindings


def register_declarations(declarations: List[Any], registry: SymbolRegistry) -> ContainerModule:
    return ContainerModule('declarations', _bind_declarations(declarations, registry))


def register_providers(providers: List[Any]) -> ContainerModule:
    return ContainerModule('providers', _bind_providers(providers))


def register_datasources(
    datasources: Union[Datasources, Mapping[str, Any]],
    config: Optional[DynamoDBConfig] = None,
) -> ContainerModule:
    if not isinstance(datasources, Datasources):
        try:
            datasources = Datasources.model_validate(dict(datasources))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid datasources: {describe_errors(e)}", original_error=e) from e
    return ContainerModule('datasources', _bind_dynamodb_tables(datasources.dynamodb, config))


def register_environment(env_vars: List[str], registry: SymbolRegistry) -> ContainerModule:
    """Bind each variable name to its current value, or ``""`` when unset."""
    bindings = []
    for env in env_vars:
        key = registry.env[env] = registry.symbol_for(env, str, 'environment')
        bindings.append(Binding(key, Strategy.CONSTANT, os.environ.get(env, '')))
    return ContainerModule('environment', bindings)


def _declaration_name(declaration: Any) -> str:
    return getattr(declaration, '__name__', None) or repr(declaration)


def _bind_declarations(declarations: List[Any], registry: SymbolRegistry) -> List[Binding]:
    bindings = []
    for declaration in declarations:
        metadata = get_declaration(declaration)
        kind = metadata.kind if metadata is not None else None

        if kind == DeclarationKind.HANDLER:
            ensure_injectable(metadata.target)
            key = registry.handlers[metadata.name] = registry.symbol_for(metadata.name, metadata.target, 'handler')
            bindings.append(Binding(key, Strategy.CLASS, metadata.target))

        elif kind == DeclarationKind.CONTROLLER:
            ensure_injectable(metadata.target)
            keys = registry.controllers[metadata.name] = ControllerKeys(
                target=registry.symbol_for(metadata.name, metadata.target, 'controller'),
                methods=registry.symbol_for(f"{metadata.name}Methods", dict, 'controller'),
            )
            bindings.append(Binding(keys.target, Strategy.CLASS, metadata.target))
            bindings.append(Binding(keys.methods, Strategy.CONSTANT, dict(metadata.methods)))

        else:
            name = _declaration_name(declaration)
            raise ConfigurationError(
                f'{name} is not a valid Handler or Controller, make sure that class has '
                f'"@handler" or "@controller" decorator.',
                subject=name
            )
    return bindings


def _bind_providers(providers: List[Any]) -> List[Binding]:
    bindings = []
    for provider in providers:
        if isinstance(provider, (Mapping, ProviderPair)):
            key, value = verify_provider(provider)
            strategy = Strategy.CLASS if inspect.isclass(value) else Strategy.CONSTANT
            bindings.append(Binding(key, strategy, value))
        elif inspect.isclass(provider):
            ensure_injectable(provider)
            bindings.append(Binding(provider, Strategy.SELF, provider))
        else:
            name = _declaration_name(provider)
            raise ConfigurationError(
                f"{name} is not a valid provider, expected a class or a provide/useValue pair",
                subject=name
            )
    return bindings


def verify_provider(provider: Union[ProviderPair, Mapping[str, Any]]) -> Tuple[Any, Any]:
    """Check an explicit provider pair and return its ``(key, value)``.

    A class ``use_value`` is made injectable so its constructor receives
    dependencies when resolved.

    Raises:
        ConfigurationError: ``provide`` or ``use_value`` is missing
    """
    if not isinstance(provider, ProviderPair):
        try:
            provider = ProviderPair.model_validate(dict(provider))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid provider: {describe_errors(e)}", original_error=e) from e

    if provider.provide is None or provider.use_value is None:
        raise ConfigurationError('Could not bind provider, "provider" or "useValue" property is undefined')

    if inspect.isclass(provider.use_value):
        ensure_injectable(provider.use_value)
    return provider.provide, provider.use_value


def _table_factory(table: TableDescriptor, config: Optional[DynamoDBConfig]) -> Callable[[], Callable[[], TableClient]]:
    def factory() -> Callable[[], TableClient]:
        def build() -> TableClient:
            return TableClient(table.name, table.region, config).init(
                table.name, table.region, table.primary_keys, table.options
            )
        return build
    return factory


def _bind_dynamodb_tables(tables: List[TableDescriptor], config: Optional[DynamoDBConfig]) -> List[Binding]:
    return [
        Binding(datasource_key(table.name), Strategy.FACTORY, _table_factory(table, config))
        for table in tables
    ]
