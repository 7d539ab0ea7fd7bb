import string

__all__ = ('is_unreserved',
           'is_sub_delim',
           'is_userinfo_char',
           'is_pchar',
           'is_query_char',
           'is_fragment_char',
           'is_query_key_char',
           'is_query_value_char')


_UNRESERVED = frozenset(string.ascii_letters + string.digits + '-._~')
_SUB_DELIMS = frozenset("!$&'()*+,;=")

_USERINFO = _UNRESERVED | _SUB_DELIMS | {'%'}
_PCHAR = _USERINFO | {':', '@'}
_QUERY = _PCHAR | {'/', '?'}

# '=' and '&' delimit the pairs, so they are not part of a key.
_QUERY_KEY = _UNRESERVED | frozenset("%!$'()*+,;:@/?")
_QUERY_VALUE = _QUERY_KEY | {'='}


def is_unreserved(c: str) -> bool:
    """ALPHA / DIGIT / "-" / "." / "_" / "~" (ASCII only)."""
    return c in _UNRESERVED


def is_sub_delim(c: str) -> bool:
    return c in _SUB_DELIMS


def is_userinfo_char(c: str) -> bool:
    """Userinfo characters, excluding the ':' and '@' delimiters."""
    return c in _USERINFO


def is_pchar(c: str) -> bool:
    return c in _PCHAR


def is_query_char(c: str) -> bool:
    return c in _QUERY


is_fragment_char = is_query_char


def is_query_key_char(c: str) -> bool:
    return c in _QUERY_KEY


def is_query_value_char(c: str) -> bool:
    return c in _QUERY_VALUE
