from typing import Any

__all__ = [
    "URLError",
    "UnknownSchemeError",
    "InvalidPortError",
    "MalformedAuthorityError",
    "MalformedUrlError",
]


class URLError(ValueError):
    pass


class UnknownSchemeError(URLError):
    def __init__(self, scheme: Any) -> None:
        super().__init__(f"Unknown URL scheme {scheme!r}.")
        self.scheme = scheme


class InvalidPortError(URLError):
    def __init__(self, port: Any) -> None:
        super().__init__(f"Invalid port {port!r}. Must be an integer in 0..65535.")
        self.port = port


class MalformedAuthorityError(URLError):
    def __init__(self, authority: str, reason: str) -> None:
        super().__init__(f"Malformed authority {authority!r}: {reason}")
        self.authority = authority


class MalformedUrlError(URLError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Malformed URL {url!r}: {reason}")
        self.url = url
