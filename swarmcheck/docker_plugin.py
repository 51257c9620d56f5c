#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-18 10:48:52 +0100 (Sun, 18 Oct 2026)
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

Base class for Nagios Plugins checking Docker Swarm via the Docker API

Opens a SwarmProbe bounded by the plugin timeout and passes it to the subclass' check() method

"""

from swarmcheck.nagios import NagiosPlugin
from swarmcheck.probe import SwarmProbe

__author__ = 'Hari Sekhon'
__version__ = '0.1'


class DockerNagiosPlugin(NagiosPlugin):

    probe_class = SwarmProbe

    def run(self):
        self.set_timeout()
        try:
            with self.probe_class(timeout=self.timeout) as probe:
                self.check(probe)
        finally:
            self.cancel_timeout()

    def check(self, probe):
        raise NotImplementedError('check() must be implemented by the plugin')
