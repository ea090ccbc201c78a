"""Service layer for webtoolbox.

Hosts the `Toolbox` facade that controllers and templates call into.
"""

from .toolbox import Toolbox

__all__ = ["Toolbox"]
