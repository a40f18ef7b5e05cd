"""src/respipe/client/__init__.py"""

from .request import Request, load
from .response import Response

__all__ = [
    "Request",
    "Response",
    "load",
]
