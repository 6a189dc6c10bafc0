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

"""Primary package for ncdutil, the dataset dispatch text utilities.

ncdutil interprets the "mode" annotations embedded in dataset URLs,
splits and joins delimiter-separated paths, and escapes path-like
strings that contain protocol-significant characters. The `ncdutil`
package can be used to directly access most of its functions::

    import ncdutil

    ncdutil.test_path_mode('https://example.org/sst.nc#mode=dap4', 'dap4')
"""

import logging as _logging

__all__ = (
    'DEFAULT_MODE_OPTIONS',
    'escape_backslash',
    'escape_entities',
    'get_mode_list',
    'get_path_mode_list',
    'InvalidArgumentError',
    'is_little_endian',
    'join',
    'MalformedInputError',
    'mktmp',
    'ModeOptions',
    'NCUtilError',
    'normalize_shell_escape',
    'OutOfMemoryError',
    'read_file',
    'split',
    'split_into',
    'Status',
    'test_mode',
    'test_path_mode',
    'unescape_backslash',
    'URIParseError',
    'write_file',
)

from ncdutil.constants import Status
from ncdutil.errors import InvalidArgumentError
from ncdutil.errors import MalformedInputError
from ncdutil.errors import NCUtilError
from ncdutil.errors import OutOfMemoryError
from ncdutil.errors import URIParseError
from ncdutil.modes import DEFAULT_MODE_OPTIONS
from ncdutil.modes import get_mode_list
from ncdutil.modes import get_path_mode_list
from ncdutil.modes import ModeOptions
from ncdutil.modes import test_mode
from ncdutil.modes import test_path_mode
from ncdutil.util import escape_backslash
from ncdutil.util import escape_entities
from ncdutil.util import is_little_endian
from ncdutil.util import join
from ncdutil.util import mktmp
from ncdutil.util import normalize_shell_escape
from ncdutil.util import read_file
from ncdutil.util import split
from ncdutil.util import split_into
from ncdutil.util import unescape_backslash
from ncdutil.util import write_file

# Package version
from ncdutil.version import __version__  # NOQA: F401

# NOTE: Child loggers (e.g., 'ncdutil.util.files') propagate here; leave
#   handler configuration to the application.
_logger = _logging.getLogger('ncdutil')
_logger.addHandler(_logging.NullHandler())
