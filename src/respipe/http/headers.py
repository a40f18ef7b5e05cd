"""src/respipe/http/headers.py

Header table for parsed HTTP responses.
"""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

__all__ = ["Headers"]

_HeaderSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Headers(Mapping[str, str]):
    """
    Read-only mapping of lower-cased header names to trimmed values.

    Names are normalized to lower case on the way in and on lookup, so
    ``headers["Content-Type"]`` and ``headers["content-type"]`` are the same
    entry. A repeated name keeps only its last value; there is no
    comma-joining of duplicates.

    Values are stored as given. Callers building a table from raw header
    lines are expected to strip them first (see ``HttpParser``).
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[_HeaderSource] = None):
        self._headers: Dict[str, str] = {}
        if headers:
            items = headers.items() if isinstance(headers, Mapping) else headers
            for k, v in items:
                # Last write wins
                self._headers[k.lower()] = v

    def __getitem__(self, key: str) -> str:
        return self._headers[key.lower()]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key.lower() in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Returned when the header is absent.

        Returns:
            The stored value, or ``default`` (``None`` unless given).
        """
        return self._headers.get(key.lower(), default)
