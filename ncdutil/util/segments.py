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

"""Delimiter tokenizer and path joiner.

:func:`split` breaks a string into its non-empty segments at a given
delimiter, and :func:`join` glues a list of segments back together into
a ``'/'``-delimited path::

    from ncdutil.util import segments

    parts = segments.split('/group/subgroup/var', '/')
    # ['group', 'subgroup', 'var']

    segments.join(parts)  # '/group/subgroup/var'
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ncdutil import errors
from ncdutil.constants import PATH_SEPARATOR
from ncdutil.util.misc import raises_out_of_memory

__all__ = ('join', 'split', 'split_into')


@raises_out_of_memory
def split_into(source: Optional[str], delimiter: str, segments: List[str]) -> None:
    """Split a string at a delimiter, appending each segment to a list.

    A single leading delimiter is treated as an anchor and skipped.
    Every other delimiter must be followed by at least one non-delimiter
    character; that is, the source may not contain an empty segment.

    The arguments are validated before the source is looked at, so a
    missing destination or a bad delimiter is rejected even when the
    source is empty.

    Args:
        source (str): String to split. ``None`` and the empty string
            both yield no segments.
        delimiter (str): Single-character delimiter.
        segments (list): Destination list; segments are appended to it
            in the order in which they occur in `source`.

    Raises:
        InvalidArgumentError: `segments` is ``None``, or `delimiter` is
            not a single character.
        MalformedInputError: `source` contains an empty segment (for
            example, two adjacent delimiters or a trailing delimiter).
        OutOfMemoryError: A segment could not be allocated. Any segments
            appended before the failure are left in `segments`.
    """

    if segments is None:
        raise errors.InvalidArgumentError('A destination list is required.')

    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise errors.InvalidArgumentError(
            'The delimiter must be a single character, not {!r}.'.format(delimiter)
        )

    if not source:
        return

    # NOTE: Only one leading delimiter is an anchor. A second one
    #   starts an empty segment, which is rejected below.
    pos = 1 if source[0] == delimiter else 0
    end = len(source)

    while pos < end:
        next_pos = source.find(delimiter, pos)
        if next_pos == -1:
            next_pos = end

        if next_pos == pos:
            raise errors.MalformedInputError(
                'Empty segment at offset {} in {!r}.'.format(pos, source)
            )

        segments.append(source[pos:next_pos])

        if next_pos == end:
            break

        pos = next_pos + 1
        if pos == end:
            # NOTE: A trailing delimiter leaves an empty last segment.
            raise errors.MalformedInputError(
                'Empty segment at offset {} in {!r}.'.format(pos, source)
            )


def split(source: Optional[str], delimiter: str) -> List[str]:
    """Split a string at a delimiter into a new list of segments.

    This is a convenience wrapper around :func:`split_into`; see that
    function for the exact rules.

    Args:
        source (str): String to split, or ``None``.
        delimiter (str): Single-character delimiter.

    Returns:
        list: The segments of `source`, in order. Every segment is a
        non-empty ``str``.

    Raises:
        InvalidArgumentError: `delimiter` is not a single character.
        MalformedInputError: `source` contains an empty segment.
        OutOfMemoryError: A segment could not be allocated.
    """

    segments: List[str] = []
    split_into(source, delimiter, segments)
    return segments


@raises_out_of_memory
def join(segments: Optional[Sequence[str]]) -> str:
    """Concatenate segments into a ``'/'``-delimited path.

    Each segment is preceded by a ``'/'`` unless it already begins with
    one. An empty sequence yields the root path, ``'/'``.

    Args:
        segments: Ordered sequence of ``str`` segments.

    Returns:
        str: The joined path.

    Raises:
        InvalidArgumentError: `segments` is ``None``.
        OutOfMemoryError: The path could not be allocated.
    """

    if segments is None:
        raise errors.InvalidArgumentError('A sequence of segments is required.')

    if not segments:
        return PATH_SEPARATOR

    parts = []
    for segment in segments:
        if not segment.startswith(PATH_SEPARATOR):
            parts.append(PATH_SEPARATOR)
        parts.append(segment)

    return ''.join(parts)
