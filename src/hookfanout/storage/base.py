"""
Module: base.py
Description: Interface of the source of registered hooks.
"""

from typing import List, Protocol, runtime_checkable

from hookfanout.models.endpoint import Endpoint


@runtime_checkable
class EndpointSource(Protocol):
    """
    Supplies the current list of registered hooks.

    Implementations raise EndpointSourceError when the list cannot be
    read; an empty list means there is nothing to dispatch.
    """

    async def list_all(self) -> List[Endpoint]:
        ...
