import logging

import pytest

import ncdutil
from ncdutil import uri


@pytest.fixture()
def dap_uri():
    return uri.URI.parse('https://example.org/thredds/dodsC/sst.nc#mode=bytes,dap4')


@pytest.fixture()
def ncdutil_caplog(caplog):
    caplog.set_level(logging.DEBUG, logger='ncdutil')
    return caplog


@pytest.fixture(params=[None, ncdutil.ModeOptions()], ids=['default', 'explicit'])
def mode_options(request):
    return request.param
