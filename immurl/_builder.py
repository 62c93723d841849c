import logging
from typing import Optional, Union

from . import _ports as ports
from ._authority import Authority
from ._encoding import enforce_str
from ._models import Url
from ._paths import Path
from ._queries import Query, QueryParams
from ._schemes import Scheme

__all__ = ["UrlBuilder"]

logger = logging.getLogger("immurl")


class UrlBuilder:
    """
    A mutable staging area for creating a `Url`.

    Each setter validates its argument, replaces the existing value, and
    returns the builder so that calls may be chained. A setter that raises
    leaves the builder unchanged.

    >>> builder = UrlBuilder("https", "example.com:8443")
    >>> str(builder.path("docs", "index.html").create())
    'https://example.com:8443/docs/index.html'

    Builders are not intended to be shared between threads, or to be reused
    after `create()` has been called.
    """

    def __init__(self, scheme: Union[Scheme, str], host: str) -> None:
        self._scheme = Scheme.of(scheme)
        self._authority = Authority.split(host)
        self._port: Optional[int] = self._authority.port
        self._path = Path.empty()
        self._query = Query.empty()
        self._fragment = ""

    @classmethod
    def from_url(cls, url: Url) -> "UrlBuilder":
        """
        Create a builder seeded with every field of an existing URL.
        """
        builder = cls(url.scheme, url.host)
        builder._port = url.port
        builder._path = url.path
        builder._query = url.query
        builder._fragment = url.fragment
        return builder

    def port(self, port: Optional[int]) -> "UrlBuilder":
        """
        Set an explicit port. `None` reverts to the scheme's default port.
        """
        self._port = ports.validate(port)
        return self

    def path(self, *segments: Union[str, Path]) -> "UrlBuilder":
        if len(segments) == 1 and isinstance(segments[0], Path):
            self._path = segments[0]
        else:
            self._path = Path.of(*segments)
        return self

    def query(
        self, key_or_params: Union[str, QueryParams], value: Optional[str] = None
    ) -> "UrlBuilder":
        """
        Replace the query, either with a single `key, value` pair, or with
        a mapping or sequence of pairs. Existing parameters are discarded,
        rather than merged.
        """
        if isinstance(key_or_params, str):
            self._query = Query.create([(key_or_params, value)])
        elif value is not None:
            raise TypeError("query value may only be given alongside a str key.")
        elif isinstance(key_or_params, Query):
            self._query = key_or_params
        else:
            self._query = Query.create(key_or_params)
        return self

    def fragment(self, fragment: str) -> "UrlBuilder":
        self._fragment = enforce_str(fragment, name="fragment")
        return self

    def create(self) -> Url:
        default_port = self._scheme.default_port
        port = default_port if self._port is None else self._port
        url = Url(
            scheme=self._scheme,
            host=self._authority.host,
            port=port,
            path=self._path,
            query=self._query,
            fragment=self._fragment,
            default_port=default_port,
        )
        logger.debug("create url=%r", url)
        return url

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} [{self._scheme.value}://"
            f"{self._authority.host} port={self._port!r}]>"
        )
