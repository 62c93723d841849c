from typing import TYPE_CHECKING, Any

from ._encoding import encode_fragment
from ._paths import Path
from ._queries import Query
from ._schemes import Scheme

if TYPE_CHECKING:  # pragma: nocover
    from ._builder import UrlBuilder

__all__ = ["Url"]


class Url:
    """
    An immutable, fully validated URL.

    Instances should be obtained from a `UrlBuilder`, or by parsing a string,
    rather than constructed directly. For example, this builds a search for
    Wolfram Alpha using unicode characters:

    >>> url = immurl.https("www.wolframalpha.com").path("input/").query("i", "π²").create()
    >>> str(url)
    'https://www.wolframalpha.com/input/?i=%CF%80%C2%B2'

    The port is always a concrete integer. When it matches the scheme's
    default port it is left out of the rendered URL:

    >>> url.port
    443

    To make a modified copy, start a new builder from an existing URL:

    >>> str(url.builder().fragment("top").create())
    'https://www.wolframalpha.com/input/?i=%CF%80%C2%B2#top'
    """

    __slots__ = (
        "_scheme",
        "_host",
        "_port",
        "_path",
        "_query",
        "_fragment",
        "_default_port",
    )

    def __init__(
        self,
        scheme: Scheme,
        host: str,
        port: int,
        path: Path,
        query: Query,
        fragment: str,
        default_port: int,
    ) -> None:
        self._scheme = scheme
        self._host = host
        self._port = port
        self._path = path
        self._query = query
        self._fragment = fragment
        self._default_port = default_port

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def path(self) -> Path:
        return self._path

    @property
    def query(self) -> Query:
        return self._query

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def default_port(self) -> int:
        return self._default_port

    @property
    def origin(self) -> str:
        """
        The "scheme://host[:port]" portion of the URL.
        """
        if self._port == self._default_port:
            return f"{self._scheme.value}://{self._host}"
        return f"{self._scheme.value}://{self._host}:{self._port}"

    def builder(self) -> "UrlBuilder":
        from ._builder import UrlBuilder

        return UrlBuilder.from_url(self)

    def _fields(self) -> tuple:
        return (
            self._scheme,
            self._host,
            self._port,
            self._path,
            self._query,
            self._fragment,
            self._default_port,
        )

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Url) and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __str__(self) -> str:
        url = self.origin
        if not self._path.is_empty:
            url += "/" + self._path.encoded
        if not self._query.is_empty:
            url += "?" + self._query.encoded
        if self._fragment:
            url += "#" + encode_fragment(self._fragment)
        return url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"
