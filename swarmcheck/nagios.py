#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2008-03-06 15:20:22 +0000 (Thu, 06 Mar 2008)
#
#  https://github.com/harisekhon/nagios-plugins
#
#  License: see accompanying Hari Sekhon LICENSE file
#
#  If you're using my code you're welcome to connect with me on LinkedIn
#  and optionally send me feedback to help steer this or other code I publish
#
#  https://www.linkedin.com/in/harisekhon
#

"""

Library to standardize Nagios Plugin development in Python

Provides the standard Nagios statuses and their exit codes, the exceptions checks raise to end with a given status,
the end() function that outputs the single result line and exits, and the NagiosPlugin base class which handles
option parsing, logging verbosity and the self-timeout

"""

import argparse
import logging
import os
import signal
import sys

__author__ = 'Hari Sekhon'
__version__ = '0.6.0'

# Standard Nagios return codes
ERRORS = {
    'OK': 0,
    'WARNING': 1,
    'CRITICAL': 2,
    'UNKNOWN': 3,
}

# order of escalation for the statuses a check can reach, least severe first
SEVERITY = ('OK', 'WARNING', 'CRITICAL')

# missing selector / bad usage, the monitoring host treats this the same as WARNING
USAGE_ERROR = 1

DEFAULT_TIMEOUT = 5

prog = os.path.basename(sys.argv[0])
log = logging.getLogger('swarmcheck')


def is_worse(status, than):
    """Returns True if the first status is more severe than the second"""
    return SEVERITY.index(status) > SEVERITY.index(than)


def plural(num):
    if num == 1:
        return ''
    return 's'


def positive_int(arg):
    """argparse type for thresholds and timeouts which must be whole numbers >= 1"""
    try:
        value = int(arg, 10)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid int value: '{}'".format(arg))
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1, got '{}'".format(arg))
    return value


class NagiosError(Exception):

    status = 'UNKNOWN'

    def __init__(self, message):
        # accepts upstream exceptions as well as strings, keeps their message verbatim
        self.message = str(message).strip()
        super().__init__(self.message)


class CriticalError(NagiosError):

    status = 'CRITICAL'


def end(status, message):
    """Prints a message and exits. First arg is the status name
    Second Arg is the string message"""

    if status not in ERRORS:
        log.debug("invalid status '%s', resetting to UNKNOWN", status)
        status = 'UNKNOWN'
    print('{}: {}'.format(status, message))
    sys.stdout.flush()
    sys.exit(ERRORS[status])


class NagiosPlugin(object):
    """Base class for plugins

    Subclasses implement add_options() / process_options() and run(), set self.msg and escalate with
    self.warning() / self.critical(), or raise a NagiosError subclass to end immediately"""

    description = ''
    version = __version__
    timeout_default = DEFAULT_TIMEOUT

    def __init__(self):
        self.status = 'OK'
        self.msg = 'msg not defined'
        self.options = None
        self.verbose = 0
        self.timeout = self.timeout_default
        self.__parser = argparse.ArgumentParser(
            prog=prog,
            description='{}\n\nVersion: {}'.format(self.description, self.version),
            formatter_class=argparse.RawDescriptionHelpFormatter)

    def add_opt(self, *args, **kwargs):
        self.__parser.add_argument(*args, **kwargs)

    def add_default_opts(self):
        self.add_opt('-t', '--timeout', type=positive_int, default=self.timeout_default,
                     help='Timeout in secs, CRITICAL if exceeded (default: {})'.format(self.timeout_default))
        self.add_opt('-v', '--verbose', action='count', default=0,
                     help='Verbose mode, logs to stderr (use -vv for debug)')
        self.add_opt('-V', '--version', action='version', version='%(prog)s version {}'.format(self.version))

    def add_options(self):
        pass

    def process_options(self):
        pass

    def get_opt(self, name):
        return getattr(self.options, name)

    def usage(self):
        self.__parser.print_help(sys.stdout)
        sys.stdout.flush()
        sys.exit(USAGE_ERROR)

    def parse_args(self, args=None):
        self.add_options()
        self.add_default_opts()
        self.options = self.__parser.parse_args(args)
        self.verbose = self.options.verbose
        self.timeout = self.options.timeout
        self.setup_logging()
        log.debug('options: %s', self.options)
        self.process_options()

    def setup_logging(self):
        logging.basicConfig(format='%(asctime)s %(name)s %(levelname)s: %(message)s')
        if self.verbose >= 2:
            log.setLevel(logging.DEBUG)
        elif self.verbose == 1:
            log.setLevel(logging.INFO)
        else:
            log.setLevel(logging.WARNING)

    def warning(self):
        if is_worse('WARNING', self.status):
            self.status = 'WARNING'

    def critical(self):
        self.status = 'CRITICAL'

    def set_timeout(self):
        """Sets an alarm to time out the plugin"""
        log.debug('setting plugin timeout to %s second%s', self.timeout, plural(self.timeout))
        signal.signal(signal.SIGALRM, self.timeout_handler)
        signal.setitimer(signal.ITIMER_REAL, self.timeout)

    @staticmethod
    def cancel_timeout():
        signal.setitimer(signal.ITIMER_REAL, 0)

    def timeout_handler(self, signum, frame):  # pylint: disable=unused-argument
        """Called by the alarm signal to kill the plugin"""
        end('CRITICAL', 'plugin has self terminated after exceeding the timeout ({} second{})'
            .format(self.timeout, plural(self.timeout)))

    def run(self):
        raise NotImplementedError('run() must be implemented by the plugin')

    def main(self, args=None):
        self.parse_args(args)
        try:
            self.run()
        except NagiosError as _:
            end(_.status, _.message)
        end(self.status, self.msg)
