"""General utilities.

This package includes the escaping, segment, file, and URI modules.
Everything except the `uri` module is hoisted into the front-door
`ncdutil` module for convenience::

    import ncdutil

    path = ncdutil.join(['group', 'var'])

Conversely, the `uri` module must be imported explicitly::

    from ncdutil import uri

    url = uri.URI.parse('file:///data/sst.nc#mode=nczarr')
"""

from ncdutil.util.escaping import escape_backslash
from ncdutil.util.escaping import escape_entities
from ncdutil.util.escaping import normalize_shell_escape
from ncdutil.util.escaping import unescape_backslash
from ncdutil.util.files import is_little_endian
from ncdutil.util.files import mktmp
from ncdutil.util.files import read_file
from ncdutil.util.files import write_file
from ncdutil.util.segments import join
from ncdutil.util.segments import split
from ncdutil.util.segments import split_into

__all__ = (
    'escape_backslash',
    'escape_entities',
    'is_little_endian',
    'join',
    'mktmp',
    'normalize_shell_escape',
    'read_file',
    'split',
    'split_into',
    'unescape_backslash',
    'write_file',
)
