#  vim:ts=4:sts=4:sw=4:et

import argparse

import pytest

from swarmcheck.nagios import ERRORS, SEVERITY, NagiosPlugin, end, is_worse, positive_int
from swarmcheck.nagios import CriticalError, NagiosError


def test_severity_order():
    assert SEVERITY == ('OK', 'WARNING', 'CRITICAL')
    assert is_worse('CRITICAL', 'WARNING')
    assert is_worse('WARNING', 'OK')
    assert not is_worse('OK', 'WARNING')
    assert not is_worse('WARNING', 'WARNING')


@pytest.mark.parametrize('status', ['OK', 'WARNING', 'CRITICAL'])
def test_end(status, capsys):
    with pytest.raises(SystemExit) as _:
        end(status, 'some message')
    assert _.value.code == ERRORS[status]
    assert capsys.readouterr().out == '{}: some message\n'.format(status)


def test_end_invalid_status_is_unknown(capsys):
    with pytest.raises(SystemExit) as _:
        end('BOGUS', 'huh')
    assert _.value.code == 3
    assert capsys.readouterr().out == 'UNKNOWN: huh\n'


def test_errors_carry_status():
    assert NagiosError('x').status == 'UNKNOWN'
    assert CriticalError('x').status == 'CRITICAL'


def test_error_keeps_upstream_message():
    _ = CriticalError(OSError('connection refused\n'))
    assert isinstance(_, NagiosError)
    assert _.message == 'connection refused'


def test_positive_int():
    assert positive_int('3') == 3
    for arg in ('0', '-1', 'x', '1.5'):
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(arg)


def test_status_only_escalates():
    plugin = NagiosPlugin()
    assert plugin.status == 'OK'
    plugin.warning()
    assert plugin.status == 'WARNING'
    plugin.critical()
    plugin.warning()
    assert plugin.status == 'CRITICAL'


def test_timeout_handler(capsys):
    plugin = NagiosPlugin()
    plugin.timeout = 5
    with pytest.raises(SystemExit) as _:
        plugin.timeout_handler(None, None)
    assert _.value.code == 2
    assert capsys.readouterr().out == \
        'CRITICAL: plugin has self terminated after exceeding the timeout (5 seconds)\n'


def test_main_ends_with_raised_status(capsys):

    class Plugin(NagiosPlugin):
        def run(self):
            raise CriticalError('not quite right')

    with pytest.raises(SystemExit) as _:
        Plugin().main([])
    assert _.value.code == 2
    assert capsys.readouterr().out == 'CRITICAL: not quite right\n'
