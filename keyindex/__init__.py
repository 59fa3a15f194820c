"""
Key-indexed lookups over ordered sequences.

Modules are grouped into index construction (``data``), timing and growth
analysis (``evaluation``), plotting/report output, and shared utilities.

Logging is disabled for library use; call ``logger.enable("keyindex")`` to see
build and benchmark records.
"""

from loguru import logger

from .data import ABSENT, KeyIndex, index_by  # noqa: F401

logger.disable("keyindex")
