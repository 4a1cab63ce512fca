"""
Module: test_dynamodb_source.py
Description: Unit tests for the DynamoDB endpoint source.

Uses moto to mock DynamoDB so the hooks table can be created and
scanned without AWS access.
"""

from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from hookfanout.exceptions import EndpointSourceError
from hookfanout.models.endpoint import Endpoint
from hookfanout.storage.base import EndpointSource
from hookfanout.storage.dynamodb import DynamoDBEndpointSource

TABLE_NAME = "test-hooks-table"


@pytest.fixture
def hooks_table():
    """Create a mock hooks table keyed by hook_id."""
    with mock_aws():
        dynamodb = boto3.resource('dynamodb', region_name='us-east-1')
        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{'AttributeName': 'hook_id', 'KeyType': 'HASH'}],
            AttributeDefinitions=[{'AttributeName': 'hook_id', 'AttributeType': 'S'}],
            BillingMode='PAY_PER_REQUEST'
        )
        yield table


@pytest.fixture
def source(hooks_table):
    return DynamoDBEndpointSource(
        table_name=TABLE_NAME,
        region_name='us-east-1',
        retry_wait_seconds=0
    )


def throttled() -> ClientError:
    return ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'slow down'}},
        'Scan'
    )


class TestDynamoDBEndpointSource:
    """Test cases for DynamoDBEndpointSource."""

    def test_initialization_invalid_table_name(self):
        with pytest.raises(ValueError, match="table_name must be a non-empty string"):
            DynamoDBEndpointSource(table_name="")

    def test_initialization_invalid_attempts(self):
        with pytest.raises(ValueError, match="max_attempts must be positive"):
            DynamoDBEndpointSource(table_name=TABLE_NAME, region_name='us-east-1', max_attempts=0)

    def test_satisfies_endpoint_source_protocol(self, source):
        assert isinstance(source, EndpointSource)

    @pytest.mark.asyncio
    async def test_empty_table(self, source):
        assert await source.list_all() == []

    @pytest.mark.asyncio
    async def test_lists_hooks_in_creation_order(self, source, hooks_table):
        hooks_table.put_item(Item={
            'hook_id': 'hook_b', 'name': 'Server#1',
            'hook_url': 'http://localhost:4001', 'created_at': '2024-01-02T00:00:00Z'
        })
        hooks_table.put_item(Item={
            'hook_id': 'hook_a', 'name': 'Server#0',
            'hook_url': 'http://localhost:4000', 'created_at': '2024-01-01T00:00:00Z'
        })

        endpoints = await source.list_all()

        assert endpoints == [
            Endpoint(endpoint_id='hook_a', name='Server#0', url='http://localhost:4000'),
            Endpoint(endpoint_id='hook_b', name='Server#1', url='http://localhost:4001'),
        ]

    @pytest.mark.asyncio
    async def test_malformed_items_skipped(self, source, hooks_table):
        hooks_table.put_item(Item={'hook_id': 'hook_a', 'hook_url': 'http://localhost:4000'})
        hooks_table.put_item(Item={'hook_id': 'hook_no_url', 'name': 'broken'})

        endpoints = await source.list_all()

        assert [e.endpoint_id for e in endpoints] == ['hook_a']
        assert endpoints[0].name == ''

    @pytest.mark.asyncio
    async def test_whitespace_only_items_skipped(self, source, hooks_table):
        hooks_table.put_item(Item={'hook_id': 'hook_a', 'hook_url': 'http://localhost:4000'})
        hooks_table.put_item(Item={'hook_id': 'hook_blank', 'hook_url': '   '})
        hooks_table.put_item(Item={'hook_id': '  ', 'hook_url': 'http://localhost:4001'})

        endpoints = await source.list_all()

        assert [e.endpoint_id for e in endpoints] == ['hook_a']

    @pytest.mark.asyncio
    async def test_follows_scan_pagination(self, source):
        source.table = MagicMock()
        source.table.scan.side_effect = [
            {'Items': [{'hook_id': 'hook_a', 'hook_url': 'http://a.test'}],
             'LastEvaluatedKey': {'hook_id': 'hook_a'}},
            {'Items': [{'hook_id': 'hook_b', 'hook_url': 'http://b.test'}]},
        ]

        endpoints = await source.list_all()

        assert [e.endpoint_id for e in endpoints] == ['hook_a', 'hook_b']
        second_call = source.table.scan.call_args_list[1]
        assert second_call.kwargs == {'ExclusiveStartKey': {'hook_id': 'hook_a'}}

    @pytest.mark.asyncio
    async def test_transient_error_retried(self, source):
        source.table = MagicMock()
        source.table.scan.side_effect = [
            throttled(),
            {'Items': [{'hook_id': 'hook_a', 'hook_url': 'http://a.test'}]},
        ]

        endpoints = await source.list_all()

        assert [e.endpoint_id for e in endpoints] == ['hook_a']
        assert source.table.scan.call_count == 2

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_endpoint_source_error(self, source):
        source.table = MagicMock()
        source.table.scan.side_effect = throttled()

        with pytest.raises(EndpointSourceError, match=TABLE_NAME):
            await source.list_all()

        assert source.table.scan.call_count == 3

    @pytest.mark.asyncio
    async def test_missing_table_raises_endpoint_source_error(self, hooks_table):
        source = DynamoDBEndpointSource(
            table_name="no-such-table",
            region_name='us-east-1',
            max_attempts=1
        )

        with pytest.raises(EndpointSourceError):
            await source.list_all()
