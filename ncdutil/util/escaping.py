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

"""Escaping utilities.

This module implements two independent escape dialects used when
embedding path-like strings in URLs and XML-ish documents:

* backslash escaping of the characters that are significant in a
  dataset path (``\\``, ``/``, ``.`` and ``@``), together with its
  inverse;
* HTML/XML entity escaping of ``&``, ``<``, ``>``, ``"`` and ``'``.

It also provides :func:`normalize_shell_escape`, which strips the
backslash some shells leave in front of a literal ``#``::

    from ncdutil.util import escaping

    escaping.escape_backslash('dir/file.nc')  # 'dir\\/file\\.nc'
"""

from __future__ import annotations

from typing import Optional

from ncdutil.util.misc import raises_out_of_memory

__all__ = (
    'escape_backslash',
    'escape_entities',
    'normalize_shell_escape',
    'unescape_backslash',
)

_BACKSLASH_SPECIALS = '\\/.@'

_ENTITIES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&apos;',
}


def _create_translator(replacements):
    table = str.maketrans(replacements)

    def translator(s):
        return s.translate(table)

    return translator


_escape_backslash = _create_translator({c: '\\' + c for c in _BACKSLASH_SPECIALS})
_escape_entities = _create_translator(_ENTITIES)


@raises_out_of_memory
def escape_backslash(s: str) -> str:
    """Escape the characters that are significant in a dataset path.

    Each occurrence of ``\\``, ``/``, ``.`` or ``@`` is prefixed with a
    backslash. All other characters are passed through as-is.

    Args:
        s (str): String to escape.

    Returns:
        str: The escaped string. :func:`unescape_backslash` reverses
        the transformation.

    Raises:
        OutOfMemoryError: The escaped string could not be allocated.
    """

    return _escape_backslash(s)


@raises_out_of_memory
def unescape_backslash(s: Optional[str]) -> Optional[str]:
    """Remove backslash escaping from a string.

    Each backslash is dropped and the character following it is copied
    verbatim, whatever that character is. Hence an escaped backslash
    decodes to a single backslash, and a trailing lone backslash is
    simply dropped.

    Note:
        This is the exact inverse of :func:`escape_backslash`. When
        applied to arbitrary text, it strips every backslash that is not
        itself escaped by another backslash.

    Args:
        s (str): String to unescape, or ``None``.

    Returns:
        str: The unescaped string, or ``None`` if `s` was ``None``.

    Raises:
        OutOfMemoryError: The unescaped string could not be allocated.
    """

    if s is None:
        return None

    # PERF: Don't take the time to instantiate a new string unless we
    # have to.
    if '\\' not in s:
        return s

    chars = []
    escaped = False
    for c in s:
        if escaped:
            chars.append(c)
            escaped = False
        elif c == '\\':
            escaped = True
        else:
            chars.append(c)

    return ''.join(chars)


@raises_out_of_memory
def escape_entities(s: str) -> str:
    """Replace XML special characters with their entity references.

    The characters ``&``, ``<``, ``>``, ``"`` and ``'`` are replaced
    with ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&apos;``,
    respectively.

    Note:
        No decoding counterpart is provided.

    Args:
        s (str): String to escape.

    Returns:
        str: The escaped string.

    Raises:
        OutOfMemoryError: The escaped string could not be allocated.
    """

    return _escape_entities(s)


@raises_out_of_memory
def normalize_shell_escape(s: Optional[str]) -> Optional[str]:
    """Strip the backslash that a shell may leave in front of ``#``.

    Depending on the platform, the shell sometimes passes an escaped
    octothorpe through without removing the backslash, which breaks
    URLs with a fragment (e.g., ``'http://host/data\\#mode=dap4'``).
    A backslash is removed only when it immediately precedes ``#``;
    any other backslash is left in place.

    Args:
        s (str): Possibly shell-escaped URL or path, or ``None``.

    Returns:
        str: The normalized string, or ``None`` if `s` was ``None``.

    Raises:
        OutOfMemoryError: The normalized string could not be allocated.
    """

    if s is None:
        return None

    return s.replace('\\#', '#')
