import dataclasses
import ipaddress
import types
from typing import Generic, Mapping, Optional, Tuple, TypeVar, Union

__all__ = ('Span', 'User', 'UserAndPassword', 'UserInfo', 'Authority', 'URI',
           'Domain', 'IPv4', 'IPv6', 'Host', 'classify_host', 'serialize')


class Span:
    """A view of ``source[start:stop]`` that does not copy the text.

    A Span compares and hashes like the string it covers, so a parsed
    query can be looked up with plain ``str`` keys.  ``str(span)``
    materializes an independent copy.
    """

    __slots__ = ('source', 'start', 'stop')

    def __init__(self, source: str, start: int, stop: int):
        self.source = source
        self.start = start
        self.stop = stop

    def __str__(self):
        return self.source[self.start:self.stop]

    def __repr__(self):
        return 'Span({!r})'.format(str(self))

    def __len__(self):
        return self.stop - self.start

    def __eq__(self, other):
        if isinstance(other, Span):
            if len(self) != len(other):
                return False
            return str(self) == str(other)
        if isinstance(other, str):
            return len(self) == len(other) and str(self) == other
        return NotImplemented

    def __hash__(self):
        return hash(str(self))


T = TypeVar('T', str, Span)


def _owned(text):
    return None if text is None else str(text)


@dataclasses.dataclass(frozen=True)
class User(Generic[T]):
    name: T

    def to_owned(self) -> 'User[str]':
        return User(str(self.name))

    def __str__(self):
        return str(self.name)


@dataclasses.dataclass(frozen=True)
class UserAndPassword(Generic[T]):
    name: T
    password: T

    def to_owned(self) -> 'UserAndPassword[str]':
        return UserAndPassword(str(self.name), str(self.password))

    def __str__(self):
        return '{}:{}'.format(self.name, self.password)


# A password only ever travels with a user name.
UserInfo = Union[User, UserAndPassword]


@dataclasses.dataclass(frozen=True)
class Domain:
    name: str


@dataclasses.dataclass(frozen=True)
class IPv4:
    address: ipaddress.IPv4Address


@dataclasses.dataclass(frozen=True)
class IPv6:
    address: ipaddress.IPv6Address


Host = Union[Domain, IPv4, IPv6]


def classify_host(host) -> Host:
    """Tell a bracketed IPv6 literal, a dotted-quad and a domain apart.

    Anything that is neither a valid ``[IPv6]`` literal nor a valid
    IPv4 address is a domain, including malformed bracketed hosts.
    """
    text = str(host)
    if text.startswith('[') and text.endswith(']'):
        try:
            return IPv6(ipaddress.IPv6Address(text[1:-1]))
        except ValueError:
            pass
    try:
        return IPv4(ipaddress.IPv4Address(text))
    except ValueError:
        return Domain(text)


@dataclasses.dataclass(frozen=True)
class Authority(Generic[T]):
    host: T
    userinfo: Optional[UserInfo] = None
    port: Optional[int] = None

    @property
    def host_kind(self) -> Host:
        return classify_host(self.host)

    def to_owned(self) -> 'Authority[str]':
        userinfo = self.userinfo
        if userinfo is not None:
            userinfo = userinfo.to_owned()
        return Authority(str(self.host), userinfo, self.port)

    def __str__(self):
        s = str(self.host)
        if self.userinfo is not None:
            s = '{}@{}'.format(self.userinfo, s)
        if self.port is not None:
            s += ':{}'.format(self.port)
        return s


@dataclasses.dataclass(frozen=True)
class URI(Generic[T]):
    """A parsed URI.

    ``parse()`` returns a ``URI[Span]`` whose text fields point into the
    parsed string; ``to_owned()`` copies every piece of text out into a
    ``URI[str]``.  ``path`` is always a tuple after a parse (empty when
    the URI has no path) and ``query`` is a read-only mapping in which
    the last occurrence of a repeated key wins.
    """

    scheme: T
    authority: Authority
    path: Optional[Tuple[T, ...]] = ()
    query: Optional[Mapping[T, T]] = None
    fragment: Optional[T] = None

    def __post_init__(self):
        if self.path is not None:
            object.__setattr__(self, 'path', tuple(self.path))
        if self.query is not None:
            object.__setattr__(
                self, 'query', types.MappingProxyType(dict(self.query)))

    def __hash__(self):
        query = self.query
        if query is not None:
            query = frozenset(query.items())
        return hash((self.scheme, self.authority, self.path, query,
                     self.fragment))

    @classmethod
    def parse(cls, uri: str) -> 'URI[str]':
        """Parse *uri* and return an owned result."""
        from .uri_parser import parse
        return parse(uri).to_owned()

    def to_owned(self) -> 'URI[str]':
        path = self.path
        if path is not None:
            path = tuple(str(segment) for segment in path)
        query = self.query
        if query is not None:
            query = {str(k): str(v) for k, v in query.items()}
        return URI(
            scheme=str(self.scheme),
            authority=self.authority.to_owned(),
            path=path,
            query=query,
            fragment=_owned(self.fragment))

    def __str__(self):
        return serialize(self)


def serialize(uri: URI) -> str:
    """Render *uri* back to text.

    Query pairs come out in mapping order and nothing is percent-encoded,
    so the result is only guaranteed to parse back to an equal URI, not
    to reproduce the original string.
    """
    parts = [str(uri.scheme), '://', str(uri.authority)]
    for segment in uri.path or ():
        parts.append('/')
        parts.append(str(segment))
    if uri.query is not None:
        parts.append('?')
        parts.append('&'.join(
            '{}={}'.format(k, v) for k, v in uri.query.items()))
    if uri.fragment is not None:
        parts.append('#')
        parts.append(str(uri.fragment))
    return ''.join(parts)
