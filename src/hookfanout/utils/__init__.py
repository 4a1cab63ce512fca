"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
- batch_helpers: Chunking of hook lists
- metrics: CloudWatch metrics publishing
"""

__all__ = []
