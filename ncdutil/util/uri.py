# Copyright 2026 by the ncdutil authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""URI utilities.

This module provides the small subset of URL handling that dataset
dispatch needs: recognizing whether a path is a URL at all, splitting
it into parts, and looking up the ``key=value`` parameters carried in
its fragment. These functions are not hoisted into the `ncdutil`
module, and so must be explicitly imported::

    from ncdutil import uri

    url = uri.URI.parse('https://example.org/data.nc#mode=dap4,bytes')
    url.fragment_lookup('mode')  # 'dap4,bytes'
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ncdutil import errors
from ncdutil.util.misc import ascii_lower

__all__ = (
    'URI',
    'decode',
    'parse_host',
    'url_basename',
)

# NOTE: A scheme needs at least two characters; otherwise, a Windows
#   drive letter such as 'C:' would be mistaken for one.
_SCHEME_PATTERN = re.compile(r'([A-Za-z][A-Za-z0-9+.\-]+):')

_HEX_DIGITS = '0123456789ABCDEFabcdef'

# This map construction is based on urllib's implementation
_HEX_TO_BYTE = {
    (a + b).encode(): bytes([int(a + b, 16)]) for a in _HEX_DIGITS for b in _HEX_DIGITS
}


def decode(encoded_uri: str, unquote_plus: bool = True) -> str:
    """Decode percent-encoded characters in a URI or a part thereof.

    This function models the behavior of `urllib.parse.unquote_plus`.
    Malformed percent sequences, such as ``'%'`` or ``'%G1'``, are
    passed through unchanged.

    Args:
        encoded_uri (str): An encoded URI (full or partial).

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters in the given string, rather than converting them to
            spaces (default ``True``).

    Returns:
        str: A decoded URI. If the URI contains escaped non-ASCII
        characters, UTF-8 is assumed per RFC 3986.
    """

    decoded_uri = encoded_uri

    if unquote_plus and '+' in decoded_uri:
        decoded_uri = decoded_uri.replace('+', ' ')

    # Short-circuit if we can
    if '%' not in decoded_uri:
        return decoded_uri

    # NOTE: Unescaped non-ASCII characters should never appear in a URI,
    #   but encode them into a non-lossy format just in case they do.
    tokens = decoded_uri.encode().split(b'%')

    decoded = bytearray(tokens[0])
    for token in tokens[1:]:
        try:
            decoded += _HEX_TO_BYTE[token[:2]] + token[2:]
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded += b'%' + token

    return decoded.decode('utf-8', 'replace')


def parse_host(host: str, default_port: Optional[int] = None) -> Tuple[str, Optional[int]]:
    """Parse a canonical 'host:port' string into parts.

    The host may be a domain name, an IPv4 address, or a bracketed IPv6
    address.

    Args:
        host (str): Host string to parse, optionally containing a
            port number.

    Keyword Arguments:
        default_port (int): Port number to return when the host string
            does not contain one (default ``None``).

    Returns:
        tuple: A parsed (*host*, *port*) tuple from the given
        host string, with the port converted to an ``int``.

    Raises:
        ValueError: The port is not a number.
    """

    if host.startswith('['):
        # IPv6 address, possibly with a port
        pos = host.rfind(']:')
        if pos != -1:
            return (host[1:pos], int(host[pos + 2 :]))
        return (host[1:-1], default_port)

    pos = host.rfind(':')
    if (pos == -1) or (pos != host.find(':')):
        # Bare domain name or IP address
        return (host, default_port)

    name, _, port = host.partition(':')
    return (name, int(port))


def _parse_params(text: str, sep: str = '&') -> List[Tuple[str, str]]:
    params = []

    for field in text.split(sep):
        if not field:
            continue

        key, _, value = field.partition('=')
        params.append((decode(key, unquote_plus=False), decode(value, unquote_plus=False)))

    return params


def _lookup(params: List[Tuple[str, str]], key: str) -> Optional[str]:
    key = ascii_lower(key)
    for name, value in params:
        if ascii_lower(name) == key:
            return value

    return None


def _strip_bracket_params(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    # NOTE: Legacy URLs may be prefixed with parameters in brackets, as in
    #   '[log][show=fetch]http://host/path'. These are treated as if they
    #   had been given in the fragment.
    params = []

    while url.startswith('['):
        end = url.find(']')
        if end == -1:
            raise errors.URIParseError('Unterminated bracket parameter in URL.')

        params.extend(_parse_params(url[1:end]))
        url = url[end + 1 :]

    return url, params


class URI:
    """A URL split into its parts.

    Instances are normally created by :meth:`URI.parse`.

    Attributes:
        scheme (str): URL scheme, e.g., ``'https'`` or ``'file'``.
        user (str): User name from the authority, or ``None``.
        password (str): Password from the authority, or ``None``.
        host (str): Host name or address, or ``None`` when the URL has
            no authority component.
        port (int): Port number, or ``None``.
        path (str): Path component (may be empty).
        query (str): Raw query string, or ``None``.
        fragment (str): Raw fragment, or ``None``.
        fragment_params (list): Ordered (*key*, *value*) pairs parsed
            from any leading bracket parameters followed by the
            ``'&'``-separated fragment. A key without ``'='`` has an
            empty value.
        query_params (list): Ordered (*key*, *value*) pairs parsed from
            the query string.
    """

    __slots__ = (
        'scheme',
        'user',
        'password',
        'host',
        'port',
        'path',
        'query',
        'fragment',
        'fragment_params',
        'query_params',
    )

    def __init__(
        self,
        scheme: str,
        path: str = '',
        host: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        query: Optional[str] = None,
        fragment: Optional[str] = None,
        fragment_params: Optional[List[Tuple[str, str]]] = None,
    ) -> None:
        self.scheme = scheme
        self.path = path
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.query = query
        self.fragment = fragment

        if fragment_params is None:
            fragment_params = _parse_params(fragment) if fragment else []
        self.fragment_params = fragment_params
        self.query_params = _parse_params(query) if query else []

    @classmethod
    def parse(cls, url: str) -> URI:
        """Parse a URL string.

        Only the generic ``scheme:[//authority]path[?query][#fragment]``
        layout is recognized; no scheme-specific validation is done.

        Args:
            url (str): The URL to parse.

        Returns:
            URI: The parsed URL.

        Raises:
            URIParseError: `url` is not a URL (e.g., a plain file path).
        """

        if not isinstance(url, str) or not url:
            raise errors.URIParseError('A URL must be a non-empty string.')

        url, bracket_params = _strip_bracket_params(url)

        match = _SCHEME_PATTERN.match(url)
        if match is None:
            raise errors.URIParseError('Missing or invalid scheme in {!r}.'.format(url))

        scheme = match.group(1).lower()
        rest = url[match.end() :]

        rest, hash_sign, fragment = rest.partition('#')
        rest, question_mark, query = rest.partition('?')

        user = password = host = port = None
        if rest.startswith('//'):
            authority, slash, path = rest[2:].partition('/')
            path = slash + path

            userinfo, at_sign, hostport = authority.rpartition('@')
            if at_sign:
                user, colon, password = userinfo.partition(':')
                if not colon:
                    password = None

            try:
                host, port = parse_host(hostport)
            except ValueError as ex:
                raise errors.URIParseError(
                    'Invalid port in {!r}.'.format(hostport)
                ) from ex
        else:
            path = rest

        return cls(
            scheme,
            path=path,
            host=host,
            port=port,
            user=user,
            password=password,
            query=query if question_mark else None,
            fragment=fragment if hash_sign else None,
            fragment_params=bracket_params + _parse_params(fragment),
        )

    def fragment_lookup(self, key: str) -> Optional[str]:
        """Return the value of a fragment parameter.

        Keys are compared case-insensitively; if the key occurs more than
        once, the first value wins.

        Args:
            key (str): Parameter name.

        Returns:
            str: The (percent-decoded) value, ``''`` for a key given
            without a value, or ``None`` if the key is absent.
        """
        return _lookup(self.fragment_params, key)

    def query_lookup(self, key: str) -> Optional[str]:
        """Return the value of a query parameter (see :meth:`fragment_lookup`)."""
        return _lookup(self.query_params, key)

    def __repr__(self) -> str:
        return '<{}: {}://{}{}>'.format(
            self.__class__.__name__, self.scheme, self.host or '', self.path
        )


def url_basename(url: str) -> str:
    """Return the last path segment of a URL, minus any extension.

    For example, ``'https://example.org/data/sst.nc#mode=dap4'`` yields
    ``'sst'``. A leading dot (as in ``'.hidden'``) is not treated as the
    start of an extension.

    Args:
        url (str): The URL to examine.

    Returns:
        str: The basename.

    Raises:
        URIParseError: `url` is not a URL.
    """

    parsed = URI.parse(url)

    basename = parsed.path.rpartition('/')[2]
    dot = basename.rfind('.')
    if dot > 0:
        basename = basename[:dot]

    return basename
