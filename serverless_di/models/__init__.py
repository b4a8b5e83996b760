from .declarations import DECLARATION_ATTR, Declaration, DeclarationKind, get_declaration
from .module import (
    Datasources,
    ModuleDescription,
    ProviderPair,
    TableDescriptor,
    describe_errors,
)
from .options import (
    PutAllOptions,
    ReturnConsumedCapacity,
    ReturnItemCollectionMetrics,
    ReturnValues,
    TableOptions,
)

__all__ = [
    # Declarations
    "DECLARATION_ATTR",
    "Declaration",
    "DeclarationKind",
    "get_declaration",

    # Module description
    "Datasources",
    "ModuleDescription",
    "ProviderPair",
    "TableDescriptor",
    "describe_errors",

    # Table options and enums
    "PutAllOptions",
    "ReturnConsumedCapacity",
    "ReturnItemCollectionMetrics",
    "ReturnValues",
    "TableOptions",
]
