#  vim:ts=4:sts=4:sw=4:et

from swarmcheck.probe import Node, ReplicaStatus, Service


class FakeProbe(object):
    """Stands in for the SwarmProbe class: calling it returns the probe itself"""

    def __init__(self, nodes=(), services=(), error=None):
        self.nodes = list(nodes)
        self.services = list(services)
        self.error = error
        self.timeout = None
        self.closed = False
        self.calls = []

    def __call__(self, timeout):
        self.timeout = timeout
        return self

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.closed = True

    def list_nodes(self):
        self.calls.append('list_nodes')
        if self.error:
            raise self.error
        return list(self.nodes)

    def list_services(self, name):
        self.calls.append(('list_services', name))
        if self.error:
            raise self.error
        return list(self.services)


def nodes(*states):
    """nodes('ready', 'down') => hosts a, b, ... in those states"""
    return [Node(chr(ord('a') + i), state) for i, state in enumerate(states)]


def service(name, running=None, desired=None):
    if running is None:
        return Service(name, None)
    return Service(name, ReplicaStatus(running, desired))
