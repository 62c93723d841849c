import enum
from typing import Union

from ._exceptions import UnknownSchemeError

__all__ = ["Scheme"]


# * https://tools.ietf.org/html/rfc3986#section-3.2.3
# * https://url.spec.whatwg.org/#url-miscellaneous
# * https://url.spec.whatwg.org/#scheme-state
DEFAULT_PORTS = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}


class Scheme(enum.Enum):
    """
    The set of URL schemes that may be used to build a URL.

    Each scheme knows its own default port, which is used whenever a URL is
    built without an explicit port.

    >>> Scheme.of("HTTPS")
    <Scheme.HTTPS: 'https'>
    >>> Scheme.HTTPS.default_port
    443
    """

    FTP = "ftp"
    HTTP = "http"
    HTTPS = "https"
    WS = "ws"
    WSS = "wss"

    @property
    def default_port(self) -> int:
        return DEFAULT_PORTS[self.value]

    @classmethod
    def of(cls, scheme: Union["Scheme", str]) -> "Scheme":
        if isinstance(scheme, Scheme):
            return scheme
        if not isinstance(scheme, str):
            raise UnknownSchemeError(scheme)
        try:
            return cls(scheme.lower())
        except ValueError:
            raise UnknownSchemeError(scheme) from None

    def __str__(self) -> str:
        return self.value
