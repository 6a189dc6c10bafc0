import importlib
import pathlib

import pytest

import ncdutil
from ncdutil.util import misc


def test_star_import_exports_everything():
    namespace = {}
    exec('from ncdutil import *', namespace)

    for name in ncdutil.__all__:
        assert namespace[name] is getattr(ncdutil, name)


def test_write_file_hoisted():
    from ncdutil.util import files

    assert ncdutil.write_file is files.write_file


def test_uri_front_door_is_the_alias_module():
    import ncdutil.uri  # NOQA: F401

    from ncdutil import uri

    alias = importlib.import_module('ncdutil.uri')
    assert uri is alias
    assert ncdutil.uri is alias
    assert uri.URI is ncdutil.util.uri.URI
    assert uri.url_basename is ncdutil.util.uri.url_basename


@pytest.mark.parametrize(
    'value,expected',
    [
        ('DAP4', 'dap4'),
        ('MiXeD-Case_1', 'mixed-case_1'),
        ('\u212a', '\u212a'),
        ('\u0130', '\u0130'),
        ('\u00c9T\u00c9', '\u00c9t\u00c9'),
        ('', ''),
    ],
)
def test_ascii_lower(value, expected):
    assert misc.ascii_lower(value) == expected


def test_license_headers_name_project_authors():
    package_dir = pathlib.Path(ncdutil.__file__).parent

    for source in package_dir.rglob('*.py'):
        text = source.read_text(encoding='utf-8')
        if 'Licensed under the Apache License' in text:
            assert text.startswith('# Copyright 2026 by the ncdutil authors.\n'), source
