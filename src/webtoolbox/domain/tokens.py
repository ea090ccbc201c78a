"""HMAC token helpers.

Tokens are the hex digest of ``HMAC(key, salt)``. They have no identity or
storage of their own; callers persist and compare them as they see fit.
"""

from __future__ import annotations

import hashlib
import hmac

from .errors import UnsupportedAlgorithmError

DEFAULT_ALGORITHM = "sha256"

# shake_* digests have no fixed length and cannot back an HMAC.
SUPPORTED_ALGORITHMS = frozenset(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
)


def resolve_algorithm(algorithm: str) -> str:
    """Return the canonical (lower-case) name of a supported digest.

    Raises:
        UnsupportedAlgorithmError: If the digest is unknown or variable-length.
    """
    name = algorithm.lower() if isinstance(algorithm, str) else ""
    if name not in SUPPORTED_ALGORITHMS:
        raise UnsupportedAlgorithmError(str(algorithm))
    return name


def hmac_token(salt: str, key: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Return ``HMAC(key, salt)`` under `algorithm`, hex-encoded."""
    digestmod = resolve_algorithm(algorithm)
    return hmac.new(
        key.encode("utf-8"), salt.encode("utf-8"), digestmod
    ).hexdigest()


def tokens_match(known: object, candidate: object) -> bool:
    """Compare two tokens in constant time.

    Both values are compared as UTF-8 bytes with `hmac.compare_digest`, whose
    running time does not depend on where the first difference is. Non-string
    inputs never match.
    """
    if not isinstance(known, str) or not isinstance(candidate, str):
        return False
    return hmac.compare_digest(known.encode("utf-8"), candidate.encode("utf-8"))
