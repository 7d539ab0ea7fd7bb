"""Parse URIs of the form::

    scheme://[user[:password]@]host[:port][/segment...][?key=value&...][#fragment]

Each stage takes ``(source, pos)`` and returns either a ``(pos, value)``
match, where ``pos`` is the offset just past what was consumed, or a
`Mismatch`.  Stages never raise; `parse` and `parse_authority` turn a
mismatch into a `URIParserError`.
"""

import collections
import logging
import string

from . import chars
from .errors import (URIParserError,
                     URIParserInvalidSchemeError,
                     URIParserInvalidHostError,
                     URIParserInvalidPortError,
                     URIParserInvalidFragmentError,
                     URIParserTrailingDataError)
from .models import Span, User, UserAndPassword, Authority, URI

__all__ = ('parse',
           'parse_authority',
           'parse_scheme',
           'parse_credentials',
           'parse_host_port',
           'parse_path',
           'parse_query',
           'parse_fragment',
           'optional',
           'Mismatch')


logger = logging.getLogger(__name__)


Mismatch = collections.namedtuple(
    'Mismatch', ('component', 'position', 'expected', 'fatal'),
    defaults=(False,))
Mismatch.__doc__ = """A stage did not match.

A fatal mismatch (unterminated IPv6 literal, port overflow) fails the
whole parse even when the stage was optional.
"""


_errors = {
    'scheme': URIParserInvalidSchemeError,
    'host': URIParserInvalidHostError,
    'port': URIParserInvalidPortError,
    'fragment': URIParserInvalidFragmentError,
    'uri': URIParserTrailingDataError,
    'authority': URIParserTrailingDataError,
}

_digits = frozenset(string.digits)
_host_stop = frozenset('/?:#')


def optional(found, pos):
    """Report a recoverable mismatch as an absent value at *pos*.

    *pos* is the checkpoint the failed attempt started from; nothing the
    attempt looked at is consumed.
    """
    if isinstance(found, Mismatch) and not found.fatal:
        return pos, None
    return found


def _scan(source, pos, accept):
    end = len(source)
    while pos < end and accept(source[pos]):
        pos += 1
    return pos


def parse_scheme(source, pos=0):
    """Everything up to the first ':', which must open '://'."""
    colon = source.find(':', pos)
    if colon == -1:
        return Mismatch('scheme', len(source), "'://'")
    if not source.startswith('://', colon):
        return Mismatch('scheme', colon, "'://'")
    return colon + 3, Span(source, pos, colon)


def _user_and_password(source, pos):
    user_end = _scan(source, pos, chars.is_userinfo_char)
    if user_end == pos:
        return Mismatch('userinfo', pos, 'userinfo character')
    if not source.startswith(':', user_end):
        return Mismatch('userinfo', user_end, "':'")
    password_end = _scan(source, user_end + 1, chars.is_userinfo_char)
    if password_end == user_end + 1:
        return Mismatch('userinfo', password_end, 'userinfo character')
    if not source.startswith('@', password_end):
        return Mismatch('userinfo', password_end, "'@'")
    return password_end + 1, UserAndPassword(
        Span(source, pos, user_end),
        Span(source, user_end + 1, password_end))


def _user(source, pos):
    end = _scan(source, pos, chars.is_userinfo_char)
    if end == pos:
        return Mismatch('userinfo', pos, 'userinfo character')
    if not source.startswith('@', end):
        return Mismatch('userinfo', end, "'@'")
    return end + 1, User(Span(source, pos, end))


def parse_credentials(source, pos=0):
    """Match ``user:password@`` or ``user@``.

    Never fails: when neither form matches the value is None and *pos*
    is returned untouched, so the host is read from the same place.
    """
    found = _user_and_password(source, pos)
    if isinstance(found, Mismatch):
        found = _user(source, pos)
    return optional(found, pos)


def _port(source, pos):
    if not source.startswith(':', pos):
        return Mismatch('port', pos, "':'")
    end = _scan(source, pos + 1, _digits.__contains__)
    if end == pos + 1:
        return Mismatch('port', end, 'digit')
    digits = source[pos + 1:end].lstrip('0')
    if len(digits) > 5 or int(digits or '0') > 0xFFFF:
        return Mismatch('port', pos + 1, 'a port number up to 65535',
                        fatal=True)
    return end, int(digits or '0')


def parse_host_port(source, pos=0):
    """Match a host and an optional ``:port``.

    A host starting with '[' is an IP literal and runs up to and including
    the closing ']', so the colons inside it are not taken for the port
    separator.  Any other host runs up to the next '/', '?', ':' or '#'.
    The value is a ``(host, port)`` pair; port is None when absent.
    """
    if source.startswith('[', pos):
        close = source.find(']', pos + 1)
        if close == -1:
            return Mismatch('host', len(source), "']'", fatal=True)
        end = close + 1
    else:
        end = _scan(source, pos, lambda c: c not in _host_stop)
        if end == pos:
            return Mismatch('host', pos, 'host')
    host = Span(source, pos, end)

    found = optional(_port(source, end), end)
    if isinstance(found, Mismatch):
        return found
    pos, port = found
    return pos, (host, port)


def parse_path(source, pos=0):
    """Match zero or more ``/segment`` parts.

    Empty segments (``//`` or a trailing ``/``) are kept as empty text.
    """
    segments = []
    while source.startswith('/', pos):
        end = _scan(source, pos + 1, chars.is_pchar)
        segments.append(Span(source, pos + 1, end))
        pos = end
    return pos, tuple(segments)


def _query_pair(source, pos):
    key_end = _scan(source, pos, chars.is_query_key_char)
    if key_end == pos:
        return Mismatch('query', pos, 'query key character')
    if not source.startswith('=', key_end):
        return Mismatch('query', key_end, "'='")
    value_end = _scan(source, key_end + 1, chars.is_query_value_char)
    pair = Span(source, pos, key_end), Span(source, key_end + 1, value_end)
    if source.startswith('&', value_end):
        value_end += 1
    return value_end, pair


def parse_query(source, pos=0):
    """Match ``?key=value&...`` into a dict.

    Pairs are read until one fails to match.  A repeated key keeps the
    last value; ``key=`` gives an empty value.
    """
    if not source.startswith('?', pos):
        return Mismatch('query', pos, "'?'")
    pos += 1
    query = {}
    while True:
        found = _query_pair(source, pos)
        if isinstance(found, Mismatch):
            break
        pos, (key, value) = found
        query[key] = value
    return pos, query


def parse_fragment(source, pos=0):
    if not source.startswith('#', pos):
        return Mismatch('fragment', pos, "'#'")
    end = _scan(source, pos + 1, chars.is_fragment_char)
    if end == pos + 1:
        return Mismatch('fragment', end, 'fragment character')
    return end, Span(source, pos + 1, end)


def _authority(source, pos):
    pos, userinfo = parse_credentials(source, pos)
    found = parse_host_port(source, pos)
    if isinstance(found, Mismatch):
        return found
    pos, (host, port) = found
    return pos, Authority(host, userinfo, port)


def _uri(source):
    found = parse_scheme(source)
    if isinstance(found, Mismatch):
        return found
    pos, scheme = found

    found = _authority(source, pos)
    if isinstance(found, Mismatch):
        return found
    pos, authority = found

    pos, path = parse_path(source, pos)
    pos, query = optional(parse_query(source, pos), pos)

    attempt = parse_fragment(source, pos)
    pos, fragment = optional(attempt, pos)

    if pos != len(source):
        # A fragment that got past its '#' explains the leftover better.
        if isinstance(attempt, Mismatch) and attempt.position > pos:
            return attempt
        return Mismatch('uri', pos, 'end of input')
    return pos, URI(scheme, authority, path, query, fragment)


def _check_type(value):
    if not isinstance(value, str):
        raise TypeError('a str object is required, not {!r}'.format(
            type(value).__name__))


def _fail(mismatch, source):
    logger.debug('cannot parse %r: bad %s at position %d',
                 source, mismatch.component, mismatch.position)
    error = _errors.get(mismatch.component, URIParserError)
    raise error(mismatch.component, mismatch.position, mismatch.expected,
                source)


def parse(uri: str) -> URI:
    """Parse a URI string into a structured Python object.

    Returns a ``URI[Span]`` whose text fields are views into *uri*:

      - scheme
      - authority: host, userinfo (User or UserAndPassword), port
      - path: tuple of segments
      - query: mapping of key to value, or None
      - fragment: text or None

    The whole string must be consumed.  Raises a subclass of
    ``URIParserError`` naming the stage and offset that failed.
    """
    _check_type(uri)
    found = _uri(uri)
    if isinstance(found, Mismatch):
        _fail(found, uri)
    return found[1]


def parse_authority(authority: str) -> Authority:
    """Parse a stand-alone ``[userinfo@]host[:port]``."""
    _check_type(authority)
    found = _authority(authority, 0)
    if isinstance(found, Mismatch):
        _fail(found, authority)
    pos, result = found
    if pos != len(authority):
        _fail(Mismatch('authority', pos, 'end of input'), authority)
    return result
