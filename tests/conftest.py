#  vim:ts=4:sts=4:sw=4:et

import pytest

from check_docker_swarm import CheckDockerSwarm


@pytest.fixture
def run_plugin(capsys):
    def _run(args, probe=None):
        plugin = CheckDockerSwarm()
        if probe is not None:
            plugin.probe_class = probe
        with pytest.raises(SystemExit) as _:
            plugin.main(args)
        return (_.value.code, capsys.readouterr().out)
    return _run
