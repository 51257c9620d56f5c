#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-18 10:31:07 +0100 (Sun, 18 Oct 2026)
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

Read-only session to a Docker Swarm manager via the Docker API

Configured from the same environment variables as the official 'docker' command:

    DOCKER_HOST, DOCKER_TLS_VERIFY, DOCKER_CERT_PATH, DOCKER_API_VERSION

Nodes and services are returned as plain tuples holding only the fields the checks need

"""

from collections import namedtuple
import json
import logging
import os

import docker
import requests

from swarmcheck.nagios import CriticalError, DEFAULT_TIMEOUT, log

__author__ = 'Hari Sekhon'
__version__ = '0.1'

Node = namedtuple('Node', 'hostname state')
Service = namedtuple('Service', 'spec_name status')
ReplicaStatus = namedtuple('ReplicaStatus', 'running desired')

# everything the docker library can raise for connection, TLS, auth, timeout or API errors
DOCKER_ERRORS = (docker.errors.DockerException, requests.exceptions.RequestException)


def parse_node(attrs):
    hostname = attrs.get('Description', {}).get('Hostname', '')
    state = attrs.get('Status', {}).get('State')
    return Node(hostname, state)


def parse_service(attrs):
    spec_name = attrs.get('Spec', {}).get('Name', '')
    # older APIs (< 1.41) don't populate ServiceStatus even when asked for it
    status = attrs.get('ServiceStatus')
    if status is not None:
        status = ReplicaStatus(int(status.get('RunningTasks', 0)),
                               int(status.get('DesiredTasks', 0)))
    return Service(spec_name, status)


class SwarmProbe(object):

    def __init__(self, timeout=DEFAULT_TIMEOUT, environment=None):
        self.timeout = timeout
        # environment is read once, here
        if environment is None:
            environment = os.environ
        self.environment = dict(environment)
        self.client = None

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, *_):
        self.close()

    def connect(self):
        version = self.environment.get('DOCKER_API_VERSION') or 'auto'
        log.info('connecting to Docker at %s using API version %s',
                 self.environment.get('DOCKER_HOST', '<default socket>'), version)
        try:
            self.client = docker.from_env(version=version,
                                          timeout=self.timeout,
                                          environment=self.environment)
        except DOCKER_ERRORS as _:
            raise CriticalError(_)

    def close(self):
        if self.client is not None:
            log.debug('closing Docker client')
            self.client.close()
            self.client = None

    def list_nodes(self):
        log.info('listing Docker Swarm nodes')
        try:
            nodes = self.client.nodes.list()
        except DOCKER_ERRORS as _:
            raise CriticalError(_)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(json.dumps([node.attrs for node in nodes], indent=4))
        return [parse_node(node.attrs) for node in nodes]

    def list_services(self, name):
        """Returns the services matched by the API name filter, which is not an exact match"""
        log.info("listing Docker Swarm services matching '%s'", name)
        try:
            try:
                services = self.client.services.list(filters={'name': name}, status=True)
            except docker.errors.InvalidVersion as _:
                # API < 1.41, list without ServiceStatus so the check reports it as unsupported
                log.info('%s, listing services without status', _)
                services = self.client.services.list(filters={'name': name})
        except DOCKER_ERRORS as _:
            raise CriticalError(_)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(json.dumps([service.attrs for service in services], indent=4))
        return [parse_service(service.attrs) for service in services]
