"""Adapters (infrastructure) for webtoolbox.

Concrete implementations of the interfaces: Babel-backed and pattern-backed
datetime formatters, and entropy sources.

Dependency rule: may import `webtoolbox.domain` and `webtoolbox.interfaces`;
the domain must not import this package.
"""
