"""Bootstrap (composition root) for webtoolbox.

Assembles a `Toolbox` at runtime: reads configuration, probes whether
locale-aware formatting is available, and wires the matching formatter and
the system entropy source.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `webtoolbox.adapters`, `webtoolbox.service_layer`,
  `webtoolbox.interfaces`, `webtoolbox.domain`, and `webtoolbox.config`.
- Inner layers must not import `webtoolbox.bootstrap`.
"""

from .bootstrap import (
    bootstrap,
    build_datetime_formatter,
    build_toolbox,
    locale_formatting_available,
)

__all__ = [
    "bootstrap",
    "build_datetime_formatter",
    "build_toolbox",
    "locale_formatting_available",
]
