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

"""Constants shared across the ncdutil package."""

from enum import Enum
import string
import sys

__all__ = (
    'ASCII_LOWERCASE_TABLE',
    'DEFAULT_MODE_DELIMITER',
    'DEFAULT_MODE_KEY',
    'PATH_SEPARATOR',
    'PYTHON_VERSION',
    'Status',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

NCDUTIL_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of ncdutil supports the current Python version."""

if not NCDUTIL_SUPPORTED:  # pragma: nocover
    raise ImportError('ncdutil requires Python 3.8+.')

PATH_SEPARATOR = '/'
"""Separator emitted between segments when joining a path."""

DEFAULT_MODE_KEY = 'mode'
"""Name of the URL fragment parameter that carries the mode list."""

DEFAULT_MODE_DELIMITER = ','
"""Separator between the tags of a mode list."""

ASCII_LOWERCASE_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
"""Translation table folding only ``A-Z`` to ``a-z``, as ``strcasecmp`` does."""


class Status(Enum):
    """Outcome of a tokenizer, joiner, or mode list operation.

    Every :class:`~ncdutil.errors.NCUtilError` carries one of these in
    its ``status`` attribute.
    """

    SUCCESS = 0
    MALFORMED_INPUT = 1
    OUT_OF_MEMORY = 2
    INVALID_ARGUMENT = 3
