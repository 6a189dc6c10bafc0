"""URI utilities.

This module provides utility functions to parse a URL and look up its
parameters. These functions are not available directly in the
`ncdutil` module, and so must be explicitly imported::

    from ncdutil import uri

    name = uri.url_basename('https://example.org/data/sst.nc')
"""

# NOTE: This module exists to make "import ncdutil.uri" work.

from ncdutil.util.uri import decode
from ncdutil.util.uri import parse_host
from ncdutil.util.uri import URI
from ncdutil.util.uri import url_basename

__all__ = ('decode', 'parse_host', 'URI', 'url_basename')
