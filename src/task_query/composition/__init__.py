"""
Composition Package - Capability Sets with Default Operations.

Components:
    - Capability: Base class; resolves inherited defaults at class creation
    - default: Decorator marking a default implementation
    - resolve_default: Which class supplies an operation
    - default_of: A named parent's default, for qualified delegation
    - Calculator / BasicCalculator: Capability with a derived default
"""

from task_query.composition.capability import (
    Capability,
    default,
    default_of,
    is_default,
    resolve_default,
)
from task_query.composition.calculator import BasicCalculator, Calculator

__all__ = [
    "Capability",
    "default",
    "default_of",
    "is_default",
    "resolve_default",
    "BasicCalculator",
    "Calculator",
]
