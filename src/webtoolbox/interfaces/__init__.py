"""Interfaces (application boundary) for webtoolbox.

Defines framework-free contracts (ABCs and small enums) shared by the
service layer and adapters: datetime formatting providers and entropy
sources. Business rules stay out of this package.

Dependency rule: may import `webtoolbox.domain` value objects and errors only.
"""
