"""Interface for sources of secure random bytes."""

import abc

# pylint: disable=too-few-public-methods


class EntropySource(abc.ABC):
    """Contract for a cryptographically secure random source."""

    @abc.abstractmethod
    def token_bytes(self, nbytes: int) -> bytes:
        """Return `nbytes` random bytes.

        Raises:
            RandomnessUnavailableError: If the source cannot provide entropy.
        """
