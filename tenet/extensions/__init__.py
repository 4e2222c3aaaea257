"""
Extensions package: retroactive method attachment to existing types.

Architecture:
- registry.py: per-runtime ExtensionRegistry with type-name chain dispatch

Design Patterns:
- Registry Pattern: method tables keyed by type name
- Chain of Responsibility: resolution walks the parent-name chain
"""

from .registry import BASE_TYPE, ExtensionRegistry

__all__ = ["BASE_TYPE", "ExtensionRegistry"]
