"""
Per-table DynamoDB client

A ``TableClient`` is bound to one table: its name, region, primary-key schema
and default write options. It exposes ``put_all``, a batched write that:

1. Splits the payload into items that carry every primary key and items that don't
2. Rejects the whole batch in strict mode when any item is invalid
3. Sends the valid items as a single BatchWriteItem request

The request is issued once per call. Nothing is chunked to DynamoDB's
25-item limit and UnprocessedItems are returned to the caller untouched.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConnectionError,
    NotFoundError,
    RetryableError,
    ValidationError,
)
from ..models.options import PutAllOptions, TableOptions
from ..utils import create_dynamo_item, partition_items

logger = logging.getLogger(__name__)


def map_dynamodb_error(error: ClientError, operation: str, table_name: str) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "BatchWriteItem")
        table_name: The DynamoDB table name

    Returns:
        Appropriate domain exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    full_message = f"{operation} on {table_name}: {error_message}"

    if error_code == 'ResourceNotFoundException':
        return NotFoundError(f"Table not found - {full_message}", 'table', table_name, original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'ItemCollectionSizeLimitExceededException':
        return ValidationError(f"Item collection size limit exceeded - {full_message}", original_error=error)

    elif error_code in ['ProvisionedThroughputExceededException', 'RequestLimitExceeded', 'ThrottlingException']:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in ['InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException']:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in ['UnrecognizedClientException', 'AccessDeniedException']:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    elif error_code in ['ExpiredTokenException', 'InvalidSignatureException']:
        return ConnectionError(f"Invalid credentials - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class TableClient:
    """
    Batch writer bound to a single DynamoDB table.

    Instances hold configuration only, plus a lazily created boto3 resource,
    and can be shared between callers once ``init`` has run.
    """

    def __init__(self, name: str, region: str, config: Optional[DynamoDBConfig] = None):
        """Create a client for ``name`` in ``region``.

        Args:
            name: DynamoDB table name
            region: AWS region of the table
            config: Connection settings; defaults to ``DynamoDBConfig()``
        """
        self.name = name
        self.region = region
        self.primary_keys: List[str] = []
        self.options = TableOptions()
        self.config = config or DynamoDBConfig()
        self._dynamodb = None

    def init(
        self,
        name: str,
        region: str,
        primary_keys: Iterable[str],
        options: Union[TableOptions, Mapping[str, Any], None] = None,
    ) -> 'TableClient':
        """Configure table name, region, key schema and default write options.

        Missing option fields take their defaults: strict off, TOTAL consumed
        capacity, no item collection metrics, ALL_NEW return values.
        """
        self.name = name
        self.region = region
        self.primary_keys = list(dict.fromkeys(primary_keys))
        if isinstance(options, TableOptions):
            self.options = options
        else:
            given = {k: v for k, v in (options or {}).items() if v is not None}
            self.options = TableOptions.model_validate(given)
        self._dynamodb = None
        logger.debug(f"Initialized table client {self.name} ({self.region}) keys={self.primary_keys}")
        return self

    def _resource_kwargs(self, config: DynamoDBConfig) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            'region_name': config.region_name,
            'config': Config(
                retries={'max_attempts': config.retries},
                max_pool_connections=config.max_pool_connections,
                read_timeout=config.timeout_seconds,
                connect_timeout=config.timeout_seconds,
            ),
        }
        if config.endpoint_url:
            kwargs['endpoint_url'] = config.endpoint_url
        return kwargs

    @property
    def dynamodb(self):
        """boto3 DynamoDB resource for this table's region, created on first access."""
        if self._dynamodb is not None:
            return self._dynamodb

        config = self.config.for_region(self.region)
        try:
            session = boto3.Session(
                aws_access_key_id=config.aws_access_key_id,
                aws_secret_access_key=config.aws_secret_access_key,
                region_name=config.region_name,
            )
            self._dynamodb = session.resource('dynamodb', **self._resource_kwargs(config))
        except Exception as e:
            logger.error(f"Could not create DynamoDB resource for table {self.name} in {config.region_name}: {e}")
            raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e, {'table': self.name}) from e
        return self._dynamodb

    def put_all(
        self,
        payload: Iterable[Any],
        options: Union[PutAllOptions, Mapping[str, Any], None] = None,
    ) -> Dict[str, Any]:
        """
        Write every valid item of ``payload`` in one BatchWriteItem request.

        Args:
            payload: Records to put (mappings or Pydantic models)
            options: Per-call overrides; unset fields fall back to the table defaults

        Returns:
            Raw BatchWriteItem response, including any UnprocessedItems

        Raises:
            ValidationError: strict mode is on and at least one item lacks a primary key
        """
        if not isinstance(options, PutAllOptions):
            options = PutAllOptions.model_validate(dict(options or {}))
        effective = options.resolve(self.options)

        valid, invalid = partition_items(self.primary_keys, payload)

        if invalid:
            if effective.strict:
                raise ValidationError(
                    "Could not process items, one or more items are invalid",
                    errors={'invalid_items': len(invalid), 'primary_keys': self.primary_keys}
                )
            logger.warning(f"Dropping {len(invalid)} item(s) without primary keys {self.primary_keys} for {self.name}")

        if not valid:
            logger.info(f"No valid items to write to {self.name}")
            return {'UnprocessedItems': {}}

        put_requests = [{'PutRequest': {'Item': create_dynamo_item(item)}} for item in valid]

        try:
            response = self.dynamodb.batch_write_item(
                RequestItems={self.name: put_requests},
                ReturnConsumedCapacity=effective.return_consumed_capacity,
                ReturnItemCollectionMetrics=effective.return_item_collection_metrics,
            )
        except ClientError as e:
            raise map_dynamodb_error(e, "BatchWriteItem", self.name) from e

        unprocessed = response.get('UnprocessedItems', {}).get(self.name, [])
        logger.info(f"Batch wrote {len(put_requests) - len(unprocessed)}/{len(put_requests)} items to {self.name}")
        return response

    def __repr__(self) -> str:
        return f"TableClient(name={self.name!r}, region={self.region!r}, primary_keys={self.primary_keys!r})"
