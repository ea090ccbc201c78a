"""Entropy sources for token salts."""

import secrets

from webtoolbox.domain.errors import RandomnessUnavailableError
from webtoolbox.interfaces.entropy import EntropySource

# pylint: disable=too-few-public-methods


class SystemEntropySource(EntropySource):
    """Operating-system CSPRNG via the `secrets` module."""

    def token_bytes(self, nbytes: int) -> bytes:
        try:
            return secrets.token_bytes(nbytes)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError(str(e)) from e


class FixedEntropySource(EntropySource):
    """Returns a repeating byte pattern.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, pattern: bytes = b"\x00") -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self._pattern = pattern

    def token_bytes(self, nbytes: int) -> bytes:
        repeats = -(-nbytes // len(self._pattern))
        return (self._pattern * repeats)[:nbytes]
