"""Domain layer for webtoolbox.

Pure, dependency-light logic: whitelists and value objects, sanitizers,
validators, datetime parsing/pattern formatting, HMAC tokens and the error
taxonomy. Nothing here reads configuration or the environment.
"""
