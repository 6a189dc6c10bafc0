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

"""Mode list resolution.

A dataset URL may carry a comma-separated list of "mode" tags in its
fragment, e.g. ``https://example.org/sst.nc#mode=dap4,bytes``. The
functions in this module extract that list and answer whether a given
tag is present::

    import ncdutil

    ncdutil.test_path_mode('https://example.org/sst.nc#mode=dap4', 'DAP4')
    # True
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ncdutil import errors
from ncdutil.constants import DEFAULT_MODE_DELIMITER
from ncdutil.constants import DEFAULT_MODE_KEY
from ncdutil.util import segments
from ncdutil.util.misc import ascii_lower
from ncdutil.util.uri import URI

__all__ = (
    'DEFAULT_MODE_OPTIONS',
    'ModeOptions',
    'get_mode_list',
    'get_path_mode_list',
    'test_mode',
    'test_path_mode',
)

_logger = logging.getLogger(__name__)


class ModeOptions:
    """Defines where and how a mode list is read from a URL.

    An instance of this class may be passed to any of the functions in
    this module; when omitted, :data:`DEFAULT_MODE_OPTIONS` is used.
    """

    mode_key: str
    """Name of the fragment parameter carrying the mode list
    (default ``'mode'``). Looked up case-insensitively.
    """

    delimiter: str
    """Single character separating the tags of a mode list
    (default ``','``).
    """

    __slots__ = ('mode_key', 'delimiter')

    def __init__(
        self, mode_key: str = DEFAULT_MODE_KEY, delimiter: str = DEFAULT_MODE_DELIMITER
    ) -> None:
        self.mode_key = mode_key
        self.delimiter = delimiter


DEFAULT_MODE_OPTIONS = ModeOptions()


def get_mode_list(
    mode_string: Optional[str], options: Optional[ModeOptions] = None
) -> List[str]:
    """Parse a mode string into its list of tags.

    Args:
        mode_string (str): Value of the mode parameter, e.g.
            ``'dap4,bytes'``. ``None`` and the empty string both yield an
            empty list. The delimiter is not consulted in that case.
        options (ModeOptions): Parsing options (default
            :data:`DEFAULT_MODE_OPTIONS`).

    Returns:
        list: The mode tags in the order given.

    Raises:
        InvalidArgumentError: `options.delimiter` is not a single
            character.
        MalformedInputError: The mode string contains an empty tag.
        OutOfMemoryError: A tag could not be allocated.
    """

    options = options or DEFAULT_MODE_OPTIONS

    if not mode_string:
        return []

    return segments.split(mode_string, options.delimiter)


def get_path_mode_list(
    path: str, options: Optional[ModeOptions] = None
) -> Optional[List[str]]:
    """Return the mode list of a path, if the path is a URL.

    Args:
        path (str): A URL or a plain file path.
        options (ModeOptions): Parsing options (default
            :data:`DEFAULT_MODE_OPTIONS`).

    Returns:
        list: ``None`` if `path` is not a URL; otherwise the mode tags,
        which is an empty list when the URL has no (or an empty) mode
        parameter.

    Raises:
        MalformedInputError: The mode string contains an empty tag.
        OutOfMemoryError: A tag could not be allocated.
    """

    options = options or DEFAULT_MODE_OPTIONS

    try:
        uri = URI.parse(path)
    except errors.URIParseError:
        return None

    return get_mode_list(uri.fragment_lookup(options.mode_key), options)


def _mode_list_or_none(
    mode_string: str, options: ModeOptions
) -> Optional[List[str]]:
    # NOTE: Mode queries only ever answer yes or no, so each failure of
    #   the underlying parse is mapped to None here.
    try:
        return get_mode_list(mode_string, options)
    except errors.MalformedInputError as ex:
        _logger.debug('Ignoring malformed mode list %r: %s', mode_string, ex)
    except errors.InvalidArgumentError as ex:
        _logger.debug('Ignoring mode list %r: %s', mode_string, ex)
    except errors.OutOfMemoryError as ex:
        _logger.debug('Unable to parse mode list %r: %s', mode_string, ex)

    return None


def test_mode(uri: URI, tag: str, options: Optional[ModeOptions] = None) -> bool:
    """Check whether a URL's mode list contains a tag.

    Tags are compared case-insensitively. This function never raises for
    a malformed mode list; it simply answers ``False``.

    Args:
        uri (URI): A parsed URL.
        tag (str): Mode tag to look for, e.g. ``'dap4'``.
        options (ModeOptions): Parsing options (default
            :data:`DEFAULT_MODE_OPTIONS`).

    Returns:
        bool: ``True`` if `tag` is in the mode list, ``False`` otherwise.
    """

    options = options or DEFAULT_MODE_OPTIONS

    mode_string = uri.fragment_lookup(options.mode_key)
    if mode_string is None:
        return False

    mode_list = _mode_list_or_none(mode_string, options)
    if mode_list is None:
        return False

    tag = ascii_lower(tag)
    for mode in mode_list:
        if ascii_lower(mode) == tag:
            return True

    return False


def test_path_mode(path: str, tag: str, options: Optional[ModeOptions] = None) -> bool:
    """Check whether the mode list of a path contains a tag.

    Args:
        path (str): A URL or a plain file path.
        tag (str): Mode tag to look for.
        options (ModeOptions): Parsing options (default
            :data:`DEFAULT_MODE_OPTIONS`).

    Returns:
        bool: ``True`` if `path` is a URL whose mode list contains `tag`,
        ``False`` otherwise (including when `path` is not a URL).
    """

    try:
        uri = URI.parse(path)
    except errors.URIParseError:
        return False

    return test_mode(uri, tag, options)
