"""
Adapters package - External service connections.
"""

from adapters import usda_adapter

__all__ = ["usda_adapter"]
