"""
serverless-di

Dependency injection for serverless applications: declare handlers,
controllers, providers, DynamoDB datasources and environment variables in a
module, and get them bound into an ``injector`` container. Includes a thin
per-table batch writer over boto3.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConfigurationError,
    ConnectionError,
    NotFoundError,
    RetryableError,
    ServerlessDIError,
    ValidationError,
)
from .models import (
    Declaration,
    DeclarationKind,
    ModuleDescription,
    PutAllOptions,
    TableDescriptor,
    TableOptions,
)
from .core import TableClient
from .di import (
    AppContext,
    SymbolRegistry,
    action,
    bootstrap,
    controller,
    datasource_key,
    handler,
    register_bindings,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "ConfigurationError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ServerlessDIError",
    "ValidationError",

    # Models
    "Declaration",
    "DeclarationKind",
    "ModuleDescription",
    "PutAllOptions",
    "TableDescriptor",
    "TableOptions",

    # Table client
    "TableClient",

    # Dependency injection
    "AppContext",
    "SymbolRegistry",
    "action",
    "bootstrap",
    "controller",
    "datasource_key",
    "handler",
    "register_bindings",
]
