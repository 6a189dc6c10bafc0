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

"""Whole-file I/O helpers and host platform queries."""

from __future__ import annotations

import logging
import os
import secrets
import string
import sys
from typing import Optional, Union

__all__ = ('is_little_endian', 'mktmp', 'read_file', 'write_file')

_logger = logging.getLogger(__name__)

_TMP_SUFFIX_CHARS = string.ascii_letters + string.digits
_TMP_SUFFIX_LENGTH = 6
_TMP_ATTEMPTS = 100


def is_little_endian() -> bool:
    """Return ``True`` if this machine is little endian."""
    return sys.byteorder == 'little'


def read_file(filename: Union[str, os.PathLike]) -> bytes:
    """Read the entire contents of a file.

    Raises:
        OSError: The file could not be opened or read.
    """
    with open(filename, 'rb') as stream:
        return stream.read()


def write_file(filename: Union[str, os.PathLike], content: Optional[bytes]) -> None:
    """Create or truncate a file and write `content` to it.

    If `content` is ``None``, an empty file is written.

    Raises:
        OSError: The file could not be opened or written.
    """
    if content is None:
        content = b''

    with open(filename, 'wb') as stream:
        stream.write(content)


def mktmp(base: str) -> Optional[str]:
    """Create a new, empty file with a unique name.

    The name is formed by appending six random alphanumeric characters
    to `base`, which may include a directory part. The file is created
    exclusively, so an existing file is never reused.

    Args:
        base (str): Path prefix for the new file.

    Returns:
        str: Path of the created file, or ``None`` if no file could be
        created (the failure is logged).
    """

    # NOTE: tempfile.mkstemp() would add its own prefix and an eight
    #   character suffix; the name here must be base plus exactly six.
    path = None
    for _ in range(_TMP_ATTEMPTS):
        suffix = ''.join(
            secrets.choice(_TMP_SUFFIX_CHARS) for _ in range(_TMP_SUFFIX_LENGTH)
        )
        path = base + suffix
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_EXCL, 0o600)
        except FileExistsError:
            continue
        except OSError as ex:
            _logger.error('Could not create temp file: %s (%s)', path, ex)
            return None

        os.close(fd)
        return path

    _logger.error('Could not create temp file: %s (name collisions)', path)
    return None
