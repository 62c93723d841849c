import collections.abc
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ._encoding import decode, encode_query_component, enforce_str

__all__ = ["Query"]


QueryParams = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Query:
    """
    An immutable, ordered sequence of decoded (key, value) query parameters.

    >>> query = Query.create({"i": "π²"})
    >>> str(query)
    'i=%CF%80%C2%B2'

    Keys may repeat, and parameter order is always preserved.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Tuple[Tuple[str, str], ...] = ()) -> None:
        self._params = tuple(params)

    @classmethod
    def create(cls, params: QueryParams) -> "Query":
        items = params.items() if isinstance(params, collections.abc.Mapping) else params
        return cls(
            tuple(
                (
                    enforce_str(key, name="query key"),
                    enforce_str(value, name="query value"),
                )
                for key, value in items
            )
        )

    @classmethod
    def empty(cls) -> "Query":
        return cls()

    @classmethod
    def from_encoded(cls, query: str) -> "Query":
        """
        Create a query from its percent-encoded form, without the leading '?'.
        Eg. "a=1&b=%20"
        """
        params = []
        for item in query.split("&"):
            if not item:
                continue
            key, _, value = item.partition("=")
            params.append((decode(key), decode(value)))
        return cls(tuple(params))

    @property
    def params(self) -> List[Tuple[str, str]]:
        return list(self._params)

    @property
    def is_empty(self) -> bool:
        return not self._params

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Return the first value for the given key.
        """
        for k, v in self._params:
            if k == key:
                return v
        return default

    @property
    def encoded(self) -> str:
        return "&".join(
            f"{encode_query_component(key)}={encode_query_component(value)}"
            for key, value in self._params
        )

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._params)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Query) and self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __str__(self) -> str:
        return self.encoded

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._params)!r})"
