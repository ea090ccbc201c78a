"""Entrypoints (inbound adapters) for webtoolbox.

Expose the toolbox to the outside world (currently the command line). Parse
inputs, call into the toolbox and present results.

Dependency rule: may import `webtoolbox.bootstrap` and `webtoolbox.service_layer`;
avoid importing `webtoolbox.adapters` directly.
"""
