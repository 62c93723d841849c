import ipaddress
import re
from typing import Any, Optional

import idna

from . import _ports as ports
from ._exceptions import MalformedAuthorityError

__all__ = ["Authority"]


# Characters permitted in an ASCII registered name, once lower-cased.
# Percent-encoded and sub-delim hosts are not supported.
REG_NAME = re.compile(r"[a-z0-9\-._~]+")


def normalize_host(host: str, *, authority: str) -> str:
    """
    Return the canonical form of a host.

    * IPv6 literals keep their brackets, and are compressed. "[0:0::1]" -> "[::1]"
    * IPv4 addresses are rendered as a plain dotted quad.
    * ASCII registered names are lower-cased. "WWW.Example.COM" -> "www.example.com"
    * Internationalized names are IDNA encoded. "bücher.de" -> "xn--bcher-kva.de"

    Both kinds of registered name must then match `REG_NAME`, with no empty
    labels. IDNA itself disallows "_" and "~", so those are only accepted in
    names that are already ASCII.
    """
    if host.startswith("["):
        if not host.endswith("]"):
            raise MalformedAuthorityError(authority, "unterminated IPv6 literal.")
        try:
            address = ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            raise MalformedAuthorityError(authority, "invalid IPv6 literal.") from None
        return f"[{address.compressed}]"

    if "[" in host or "]" in host:
        raise MalformedAuthorityError(authority, "unexpected '[' or ']' in host.")

    if not host.isascii():
        try:
            host = idna.encode(host, uts46=True).decode("ascii")
        except idna.IDNAError as exc:
            raise MalformedAuthorityError(authority, f"invalid IDNA host. {exc}") from None

    host = host.lower()
    if REG_NAME.fullmatch(host) is None:
        raise MalformedAuthorityError(authority, "invalid character in host.")
    if host.startswith(".") or ".." in host:
        raise MalformedAuthorityError(authority, "empty label in host.")
    try:
        return str(ipaddress.IPv4Address(host))
    except ValueError:
        return host


class Authority:
    """
    The result of splitting a "host[:port]" string.

    This is only ever an intermediate value, used to seed a `UrlBuilder`.
    """

    def __init__(self, host: str, port: Optional[int] = None) -> None:
        self.host = host
        self.port = port

    @classmethod
    def split(cls, authority: str) -> "Authority":
        if not isinstance(authority, str):
            seen_type = type(authority).__name__
            raise TypeError(f"host must be a str, but got {seen_type}.")

        # Split on the last ':' that isn't inside an "[...]" IPv6 literal.
        idx = authority.rfind(":")
        if idx > authority.rfind("]"):
            host, port_text = authority[:idx], authority[idx + 1 :]
        else:
            host, port_text = authority, None

        if not host:
            raise MalformedAuthorityError(authority, "empty host.")
        if "@" in host:
            raise MalformedAuthorityError(authority, "userinfo is not supported.")

        port = None if port_text is None else ports.parse(port_text)
        return cls(host=normalize_host(host, authority=authority), port=port)

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Authority)
            and self.host == other.host
            and self.port == other.port
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(host={self.host!r}, port={self.port!r})"
