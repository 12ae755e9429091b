"""Public configuration module.

Re-exports the configuration components from the _common package.
"""

from ._common.config import (
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
