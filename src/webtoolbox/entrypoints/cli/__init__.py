"""Command-line entrypoint for webtoolbox."""
