"""
Port validation.

A port of `None` means "not specified", and is resolved to the scheme's
default port when a URL is finally created.
"""
from typing import Optional

from ._exceptions import InvalidPortError

MIN_PORT = 0
MAX_PORT = 65535


def validate(port: Optional[int]) -> Optional[int]:
    if port is None:
        return None
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidPortError(port)
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortError(port)
    return port


def parse(text: str) -> int:
    """
    Parse the port portion of an authority, such as the "8080" in
    "example.com:8080".
    """
    if not (text.isascii() and text.isdigit()) or len(text) > len(str(MAX_PORT)):
        raise InvalidPortError(text)
    return validate(int(text))
