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

"""Miscellaneous utilities shared by the ncdutil modules."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from ncdutil import errors
from ncdutil.constants import ASCII_LOWERCASE_TABLE

__all__ = ('ascii_lower', 'raises_out_of_memory')

_F = TypeVar('_F', bound=Callable[..., Any])


def raises_out_of_memory(func: _F) -> _F:
    """Re-raise any :class:`MemoryError` as :class:`~.OutOfMemoryError`.

    The original exception is chained, so the traceback of the failed
    allocation is preserved.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except errors.OutOfMemoryError:
            raise
        except MemoryError as ex:
            raise errors.OutOfMemoryError(
                'Unable to allocate memory in {}()'.format(func.__name__)
            ) from ex

    return wrapper  # type: ignore[return-value]


def ascii_lower(s: str) -> str:
    """Lowercase the ASCII letters of `s`, leaving all other characters as-is.

    Unlike :meth:`str.lower`, non-ASCII characters such as ``'\\u212a'``
    (KELVIN SIGN) are never folded onto an ASCII letter.
    """
    return s.translate(ASCII_LOWERCASE_TABLE)
