"""
Percent-encoding rules for each URL component.

Component values are always held in decoded form, and are encoded only when
a URL is rendered. Any '%' in a decoded value is a literal percent sign, and
is encoded as '%25'.

See https://tools.ietf.org/html/rfc3986#section-2.1
"""
from urllib.parse import quote, unquote

# Unreserved characters, "A-Z a-z 0-9 - . _ ~", are always left as-is by
# `quote()`. These are the extra characters left unescaped per component.
SUB_DELIMS = "!$&'()*+,;="
PATH_SEGMENT_SAFE = SUB_DELIMS + ":@"
# '&', '=' and '+' are excluded so that query pairs remain unambiguous.
QUERY_SAFE = "!$'()*,;:@/?"
FRAGMENT_SAFE = QUERY_SAFE


def encode_path_segment(segment: str) -> str:
    return quote(segment, safe=PATH_SEGMENT_SAFE, encoding="utf-8")


def encode_query_component(component: str) -> str:
    return quote(component, safe=QUERY_SAFE, encoding="utf-8")


def encode_fragment(fragment: str) -> str:
    return quote(fragment, safe=FRAGMENT_SAFE, encoding="utf-8")


def decode(text: str) -> str:
    return unquote(text, encoding="utf-8")


def enforce_str(value: str, *, name: str) -> str:
    """
    Component values are held as decoded text, so must be given as strings.
    Bytes are not accepted, since their encoding would be ambiguous.
    """
    if isinstance(value, str):
        return value

    seen_type = type(value).__name__
    raise TypeError(f"{name} must be a str, but got {seen_type}.")
