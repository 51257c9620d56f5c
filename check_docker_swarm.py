#!/usr/bin/env python3
#  coding=utf-8
#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-18 11:20:46 +0100 (Sun, 18 Oct 2026)
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

Nagios Plugin to check the state of the nodes or of a named service of a Docker Swarm cluster via the Docker API

Node check (-n) raises WARNING / CRITICAL when the number of nodes down reaches the --warning / --critical
thresholds (both default to 1). Only nodes in state 'down' count as down

Service check (-s) raises CRITICAL if the service does not exist, has no running replicas or the API does not
return the service status (requires API 1.41+), WARNING if fewer replicas are running than desired

If both -n and -s are given the node check is run

Must be pointed at a Swarm Manager. Supports TLS via the same environment variables as the official 'docker' command
(DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH, DOCKER_API_VERSION)

"""

from swarmcheck import DockerNagiosPlugin, log
from swarmcheck.checks import NodeCheck, ServiceCheck, check_nodes, check_service
from swarmcheck.nagios import positive_int

__author__ = 'Hari Sekhon'
__version__ = '1.0.0'


class CheckDockerSwarm(DockerNagiosPlugin):

    description = 'It displays the state of nodes or a service of a docker swarm cluster.'
    version = __version__

    def __init__(self):
        super().__init__()
        self.msg = 'Docker msg not defined yet'
        self.request = None

    def add_options(self):
        self.add_opt('-n', '--nodes', action='store_true', help='check swarm node state')
        self.add_opt('-w', '--warning', type=positive_int, default=1,
                     help='number of nodes down for WARNING state (default: 1)')
        self.add_opt('-c', '--critical', type=positive_int, default=1,
                     help='number of nodes down for CRITICAL state (default: 1)')
        self.add_opt('-s', '--service', default='', help='check named service state')

    def process_options(self):
        service = self.get_opt('service')
        if self.get_opt('nodes'):
            if service:
                log.info("node check selected, ignoring service '%s'", service)
            self.request = NodeCheck(self.get_opt('warning'), self.get_opt('critical'))
        elif service:
            self.request = ServiceCheck(service)
        else:
            self.usage()

    def check(self, probe):
        if isinstance(self.request, NodeCheck):
            nodes = probe.list_nodes()
            (status, self.msg) = check_nodes(nodes, self.request.warning, self.request.critical)
        else:
            services = probe.list_services(self.request.name)
            (status, self.msg) = check_service(services, self.request.name)
        if status == 'CRITICAL':
            self.critical()
        elif status == 'WARNING':
            self.warning()


def main():
    CheckDockerSwarm().main()


if __name__ == '__main__':
    main()
