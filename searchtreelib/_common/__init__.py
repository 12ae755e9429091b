"""Common components shared across SearchTreeLib.

This internal package contains configuration that every other layer
depends on. It should NOT be imported directly by users.

Important: This package must NEVER import from core or tree to avoid
circular dependencies.
"""

from .config import (
    TraversalOrder,
    DuplicatePolicy,
    RenderConfig,
    TreeConfig,
)

__all__ = [
    'TraversalOrder',
    'DuplicatePolicy',
    'RenderConfig',
    'TreeConfig',
]
