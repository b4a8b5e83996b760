"""
Binding keys.

Handlers, controllers and environment variables are keyed by ``NewType``
symbols created through ``SymbolRegistry.symbol_for`` so they can be used as
constructor annotations with ``injector``:

    @inject
    def __init__(self, stage: registry.env["STAGE"]): ...

Datasources share the ``DynamoDB`` key narrowed by table name with
``Annotated``.
"""

from typing import Annotated, Any, Callable

from ..core.table_client import TableClient

TableClientFactory = Callable[[], TableClient]

# Shared key for every DynamoDB datasource; see ``datasource_key``.
DynamoDB = TableClientFactory


def datasource_key(table_name: str) -> Any:
    """Key of the factory registered for ``table_name``."""
    return Annotated[DynamoDB, table_name]
