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

"""Error classes raised by ncdutil.

All classes are available directly from the `ncdutil` package
namespace::

    import ncdutil

    try:
        segments = ncdutil.split(path, '/')
    except ncdutil.MalformedInputError:
        ...

Each error carries a :class:`~ncdutil.constants.Status` in its
``status`` attribute, so callers that deal in status codes rather than
exception types can still tell the failure modes apart.
"""

from __future__ import annotations

from ncdutil.constants import Status

__all__ = (
    'InvalidArgumentError',
    'MalformedInputError',
    'NCUtilError',
    'OutOfMemoryError',
    'URIParseError',
)


class NCUtilError(Exception):
    """Base class for all errors raised by ncdutil."""

    status: Status = Status.SUCCESS


class MalformedInputError(NCUtilError, ValueError):
    """The input text does not follow the expected grammar.

    For example, two adjacent delimiters delimit an empty segment.
    """

    status = Status.MALFORMED_INPUT


class URIParseError(MalformedInputError):
    """The given string cannot be parsed as a URL."""


class InvalidArgumentError(NCUtilError, ValueError):
    """A required argument was missing or has an unusable value."""

    status = Status.INVALID_ARGUMENT


class OutOfMemoryError(NCUtilError, MemoryError):
    """Memory could not be allocated for the result of an operation."""

    status = Status.OUT_OF_MEMORY
