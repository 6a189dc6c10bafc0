import logging
import os
import sys

import pytest

import ncdutil
from ncdutil.util import files


def test_is_little_endian():
    assert files.is_little_endian() is (sys.byteorder == 'little')


def test_write_then_read(tmp_path):
    path = tmp_path / 'content.bin'
    files.write_file(path, b'\x00CDF\x01')

    assert files.read_file(path) == b'\x00CDF\x01'
    assert files.read_file(str(path)) == b'\x00CDF\x01'


def test_write_none(tmp_path):
    path = tmp_path / 'empty.bin'
    files.write_file(path, None)

    assert path.exists()
    assert files.read_file(path) == b''


def test_write_truncates(tmp_path):
    path = tmp_path / 'content.bin'
    path.write_bytes(b'0123456789')
    files.write_file(path, b'ab')

    assert files.read_file(path) == b'ab'


def test_read_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.read_file(tmp_path / 'missing.nc')


def test_mktmp(tmp_path):
    base = str(tmp_path / 'scratch_')

    first = files.mktmp(base)
    second = files.mktmp(base)

    assert first != second
    for path in (first, second):
        assert path.startswith(base)
        assert len(path) == len(base) + 6
        assert os.path.isfile(path)
        assert os.path.getsize(path) == 0


def test_mktmp_failure_is_logged(tmp_path, caplog):
    base = str(tmp_path / 'no' / 'such' / 'dir' / 'scratch_')

    with caplog.at_level(logging.ERROR, logger='ncdutil'):
        assert files.mktmp(base) is None

    assert 'Could not create temp file' in caplog.text


def test_mktmp_collisions(tmp_path, monkeypatch, caplog):
    base = str(tmp_path / 'scratch_')
    monkeypatch.setattr(files.secrets, 'choice', lambda chars: 'a')
    (tmp_path / 'scratch_aaaaaa').touch()

    with caplog.at_level(logging.ERROR, logger='ncdutil'):
        assert files.mktmp(base) is None

    assert 'name collisions' in caplog.text


def test_hoisted():
    assert ncdutil.read_file is files.read_file
    assert ncdutil.write_file is files.write_file
    assert ncdutil.mktmp is files.mktmp
    assert ncdutil.is_little_endian is files.is_little_endian
