"""
Shared inspect documents for the test suite.
"""
import copy
import json

import pytest

from d2r.PARSERS.inspect_parser import InspectParser

BASE_CONTAINER = {
    "Id": "8d2c1f0e9b7a6c5d4e3f2a1b0c9d8e7f6a5b4c3d2e1f0a9b8c7d6e5f4a3b2c1d",
    "Name": "/web",
    "Config": {
        "Hostname": "web-host",
        "User": "",
        "Cmd": ["sh"],
        "Image": "alpine",
        "WorkingDir": "",
        "Tty": False,
        "AttachStdout": True,
        "Env": [],
        "Volumes": None,
    },
    "HostConfig": {
        "NetworkMode": "default",
        "CpusetCpus": "",
        "CpusetMems": "",
        "PidMode": "",
        "AutoRemove": False,
        "Privileged": False,
        "Binds": None,
        "VolumesFrom": None,
        "CapAdd": None,
        "CapDrop": None,
        "Dns": [],
        "ExtraHosts": None,
        "Memory": 0,
        "MemoryReservation": 0,
        "Devices": [],
        "RestartPolicy": {"Name": "no", "MaximumRetryCount": 0},
    },
    "NetworkSettings": {
        "MacAddress": "",
        "Ports": {},
    },
}


def merge(base, overrides):
    """Recursively merges overrides into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


@pytest.fixture
def container_doc():
    """Factory for container inspect objects, e.g. container_doc(Config={"Tty": True})."""
    def factory(**overrides):
        return merge(BASE_CONTAINER, overrides)
    return factory


@pytest.fixture
def parser():
    return InspectParser()


@pytest.fixture
def make_container(container_doc, parser):
    """Factory for decoded ContainerInspect records."""
    def factory(**overrides):
        return parser.parse_container(json.dumps([container_doc(**overrides)]))
    return factory


@pytest.fixture
def make_image(parser):
    """Factory for decoded ImageInspect records."""
    def factory(**doc):
        return parser.parse_image(json.dumps([doc]))
    return factory
