"""
Module: storage
Description: Package initialization for hook endpoint sources.

This package contains implementations of the EndpointSource interface:
- memory: fixed in-process hook list
- dynamodb: DynamoDB hook table
"""

from .base import EndpointSource
from .dynamodb import DynamoDBEndpointSource
from .memory import InMemoryEndpointSource

__all__ = ["EndpointSource", "DynamoDBEndpointSource", "InMemoryEndpointSource"]
