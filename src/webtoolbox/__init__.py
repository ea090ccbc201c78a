"""webtoolbox

Input sanitization, validation, datetime formatting and HMAC token helpers
for web application controllers and templates. Untrusted input is normalized
before persistence or rendering; SQL fragments are filtered against fixed
whitelists; tokens are compared in constant time.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
