"""src/respipe/utils/validators.py

Validation utilities for Respipe.
"""


def validate_url(url: str) -> bool:
    """Check that the URL uses a scheme the loader can fetch."""
    return url.startswith(("http://", "https://"))
