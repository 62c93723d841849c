from typing import Any, Iterator, Tuple

from ._encoding import decode, encode_path_segment, enforce_str

__all__ = ["Path"]


class Path:
    """
    An immutable sequence of decoded path segments.

    Segments are given as plain text, and may include '/' as a convenience
    for specifying several segments at once:

    >>> Path.of("a/b", "c").segments
    ('a', 'b', 'c')

    Empty segments are kept, so that a trailing slash can be expressed:

    >>> Path.of("input/").segments
    ('input', '')

    No '.' or '..' resolution is performed.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Tuple[str, ...] = ()) -> None:
        self._segments = tuple(segments)

    @classmethod
    def of(cls, *segments: str) -> "Path":
        flattened = []
        for segment in segments:
            segment = enforce_str(segment, name="path segment")
            flattened.extend(segment.split("/"))
        return cls(tuple(flattened))

    @classmethod
    def empty(cls) -> "Path":
        return cls()

    @classmethod
    def from_encoded(cls, path: str) -> "Path":
        """
        Create a path from its percent-encoded form, as it appears in a URL
        following the authority. Eg. "/input/%CF%80"
        """
        if not path:
            return cls()
        if path.startswith("/"):
            path = path[1:]
        return cls(tuple(decode(segment) for segment in path.split("/")))

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def filename(self) -> str:
        """
        The final segment, which is empty for a directory-like path.
        """
        return self._segments[-1] if self._segments else ""

    @property
    def encoded(self) -> str:
        return "/".join(encode_path_segment(segment) for segment in self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Path) and self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return self.encoded

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._segments)!r})"
