#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-18 10:12:41 +0100 (Sun, 18 Oct 2026)
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

Library to standardize the Docker Swarm Nagios Plugin

"""

from swarmcheck.nagios import ERRORS, SEVERITY, NagiosPlugin, end, is_worse, log
from swarmcheck.nagios import NagiosError, CriticalError
from swarmcheck.docker_plugin import DockerNagiosPlugin

__author__ = 'Hari Sekhon'
__version__ = '1.0.0'
