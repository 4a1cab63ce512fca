"""
Module: memory.py
Description: In-process hook list, for local runs and tests.
"""

from typing import Iterable, List

from hookfanout.models.endpoint import Endpoint


class InMemoryEndpointSource:
    """Endpoint source backed by a fixed list of hooks."""

    def __init__(self, endpoints: Iterable[Endpoint] = ()):
        self._endpoints = list(endpoints)

    async def list_all(self) -> List[Endpoint]:
        # Copy so callers never observe later registrations mid-dispatch
        return list(self._endpoints)
