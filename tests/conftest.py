"""
Test configuration and fixtures for serverless-di.

Provides sample declarations, table clients backed by a Mock resource, and a
moto-backed DynamoDB table for end-to-end tests.
"""

from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from serverless_di import DynamoDBConfig, SymbolRegistry, TableClient


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
    )


@pytest.fixture
def registry():
    """Fresh symbol registry."""
    return SymbolRegistry()


@pytest.fixture
def mock_dynamodb():
    """Mock boto3 DynamoDB resource."""
    dynamodb = Mock()
    dynamodb.batch_write_item.return_value = {'UnprocessedItems': {}}
    return dynamodb


@pytest.fixture
def orders_client(mock_dynamodb_config, mock_dynamodb):
    """Table client for 'orders' keyed by 'id', wired to the mock resource."""
    client = TableClient("orders", "us-east-1", mock_dynamodb_config).init("orders", "us-east-1", ["id"])
    client._dynamodb = mock_dynamodb
    return client


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource(
            'dynamodb',
            region_name='us-east-1',
            aws_access_key_id='test_key',
            aws_secret_access_key='test_secret',
        )


@pytest.fixture
def orders_table(mock_dynamodb_resource):
    """Create the orders table (hash key 'id') for testing."""
    return mock_dynamodb_resource.create_table(
        TableName='orders',
        KeySchema=[
            {'AttributeName': 'id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def events_table(mock_dynamodb_resource):
    """Create the events table (hash 'stream', range 'seq') for testing."""
    return mock_dynamodb_resource.create_table(
        TableName='events',
        KeySchema=[
            {'AttributeName': 'stream', 'KeyType': 'HASH'},
            {'AttributeName': 'seq', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'stream', 'AttributeType': 'S'},
            {'AttributeName': 'seq', 'AttributeType': 'N'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
