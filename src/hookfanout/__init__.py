"""
Package: hookfanout
Description: Batched fan-out of trigger notifications to registered hooks.

Delivers a trigger payload to every registered hook in fixed-size chunks,
retries only the hooks that failed across a fixed number of rounds, and
reports which hooks succeeded in which round and which failed for good.
"""

__version__ = "0.1.0"
