#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-18 11:02:19 +0100 (Sun, 18 Oct 2026)
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

Docker Swarm node and service checks

Each check takes the observations from a SwarmProbe and returns a (status, message) tuple,
or raises CriticalError for conditions which end the check straight away

Node check:

    only nodes in state 'down' count as unavailable, any other state including 'unknown' counts as available

    critical threshold is tested before warning so that an inverted critical <= warning still raises CRITICAL

Service check:

    the API name filter also returns services whose names merely contain the given name,
    so the exact service is picked out by its spec name

"""

from collections import namedtuple

from swarmcheck.nagios import CriticalError, log

__author__ = 'Hari Sekhon'
__version__ = '0.1'

NodeCheck = namedtuple('NodeCheck', 'warning critical')
ServiceCheck = namedtuple('ServiceCheck', 'name')


def nodes_down(nodes):
    return [node.hostname for node in nodes if node.state == 'down']


def check_nodes(nodes, warning=1, critical=1):
    down = nodes_down(nodes)
    total = len(nodes)
    log.info('%s/%s nodes down', len(down), total)
    if not down:
        return ('OK', '{} nodes available'.format(total))
    msg = '{}/{} node(s) down: {}'.format(len(down), total, ', '.join(down))
    if len(down) >= critical:
        return ('CRITICAL', msg)
    if len(down) >= warning:
        return ('WARNING', msg)
    return ('OK', msg + ' (below warning threshold {})'.format(warning))


def check_service(services, name):
    if not services:
        raise CriticalError('Could not find service {}!'.format(name))
    running = 0
    desired = 0
    for service in services:
        if service.status is None:
            raise CriticalError('Could not receive ServiceStatus for {}, maybe API does not support it!'.format(name))
        if service.spec_name == name:
            (running, desired) = service.status
        else:
            log.debug("skipping service '%s' returned by name filter '%s'", service.spec_name, name)
    if desired != 0 and running == 0:
        return ('CRITICAL', 'No service for {} is running!'.format(name))
    msg = '{}/{} services of {} are running.'.format(running, desired, name)
    if running != desired:
        return ('WARNING', msg)
    return ('OK', msg)
