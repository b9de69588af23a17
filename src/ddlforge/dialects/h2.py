"""
H2 dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import Dialect, DialectId, url_scheme


class H2Dialect:
    """
    H2 embedded database, mostly used for tests.
    """

    id: Final[str] = DialectId.H2.value
    name: Final[str] = "h2"
    url_schemes: Final[tuple[str, ...]] = ("h2",)

    def matches_url(self, url: str) -> bool:
        return url_scheme(url) in self.url_schemes


def get_h2_dialect() -> Dialect:
    return H2Dialect()
