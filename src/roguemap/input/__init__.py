"""
Input abstraction layer.

Exposes:
- InputAction: Logical input actions used by a session.
- InputMapper: Rebindable mapping from physical keys to actions.
"""
from .actions import InputAction
from .mapping import InputMapper

__all__ = ["InputAction", "InputMapper"]
