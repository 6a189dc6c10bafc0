import pytest

import ncdutil
from ncdutil import errors
from ncdutil.constants import Status
from ncdutil.util import segments


@pytest.mark.parametrize(
    'source,delimiter,expected',
    [
        ('/a/b', '/', ['a', 'b']),
        ('a/b', '/', ['a', 'b']),
        ('/', '/', []),
        ('', ',', []),
        (None, ',', []),
        ('dap4', ',', ['dap4']),
        ('bytes,dap4', ',', ['bytes', 'dap4']),
        (',bytes', ',', ['bytes']),
        ('x,x,x', ',', ['x', 'x', 'x']),
        ('/group/sub group/var.1', '/', ['group', 'sub group', 'var.1']),
        ('a/b', ',', ['a/b']),
    ],
)
def test_split(source, delimiter, expected):
    assert segments.split(source, delimiter) == expected


@pytest.mark.parametrize(
    'source,delimiter',
    [
        ('a,,b', ','),
        ('a,', ','),
        (',,a', ','),
        ('//a', '/'),
        ('/a//b', '/'),
        ('/a/', '/'),
        (',,', ','),
    ],
)
def test_split_malformed(source, delimiter):
    with pytest.raises(errors.MalformedInputError) as exc_info:
        segments.split(source, delimiter)

    assert exc_info.value.status is Status.MALFORMED_INPUT


def test_split_into_appends():
    dest = ['existing']
    assert segments.split_into('a,b', ',', dest) is None
    assert dest == ['existing', 'a', 'b']


def test_split_into_keeps_partial_results():
    dest = []
    with pytest.raises(errors.MalformedInputError):
        segments.split_into('a,b,,c', ',', dest)

    assert dest == ['a', 'b']


def test_split_into_no_destination():
    with pytest.raises(errors.InvalidArgumentError) as exc_info:
        segments.split_into('a,b', ',', None)

    assert exc_info.value.status is Status.INVALID_ARGUMENT


@pytest.mark.parametrize('delimiter', ['', ',,', None, 44])
def test_split_bad_delimiter(delimiter):
    with pytest.raises(errors.InvalidArgumentError):
        segments.split('a,b', delimiter)


def test_split_out_of_memory(monkeypatch):
    class ExhaustedList(list):
        def append(self, item):
            if len(self) == 1:
                raise MemoryError
            super().append(item)

    dest = ExhaustedList()
    with pytest.raises(errors.OutOfMemoryError) as exc_info:
        segments.split_into('a,b,c', ',', dest)

    assert exc_info.value.status is Status.OUT_OF_MEMORY
    assert dest == ['a']


@pytest.mark.parametrize(
    'parts,expected',
    [
        ([], '/'),
        (['a'], '/a'),
        (['a', 'b'], '/a/b'),
        (['/a', 'b'], '/a/b'),
        (['a', '/b'], '/a/b'),
        (('x', 'y'), '/x/y'),
        ([''], '/'),
    ],
)
def test_join(parts, expected):
    assert segments.join(parts) == expected


def test_join_none():
    with pytest.raises(errors.InvalidArgumentError):
        segments.join(None)


@pytest.mark.parametrize(
    'path',
    ['/a', '/a/b', '/group/subgroup/var', '/x.nc/y@z/w'],
)
def test_join_split_round_trip(path):
    assert segments.join(segments.split(path, '/')) == path


def test_split_join_round_trip_normalizes_leading_empty_segment():
    assert segments.join(segments.split('/', '/')) == '/'


def test_hoisted():
    assert ncdutil.split is segments.split
    assert ncdutil.split_into is segments.split_into
    assert ncdutil.join is segments.join


@pytest.mark.parametrize('source', [None, '', 'a,b'])
def test_split_into_checks_destination_before_source(source):
    with pytest.raises(errors.InvalidArgumentError):
        segments.split_into(source, ',', None)


@pytest.mark.parametrize('source', [None, ''])
def test_split_checks_delimiter_before_source(source):
    with pytest.raises(errors.InvalidArgumentError):
        segments.split(source, '')
