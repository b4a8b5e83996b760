"""
Core infrastructure components for DynamoDB operations.

- TableClient: per-table batch writer over boto3
- map_dynamodb_error: ClientError to domain exception mapping
"""

from .table_client import TableClient, map_dynamodb_error

__all__ = [
    "TableClient",
    "map_dynamodb_error",
]
