# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Rebuilds a `docker run` command line from decoded inspect records.

The builder walks a fixed, ordered list of rules. Each rule is a predicate
over the container and a renderer producing zero or more fragments; the
fragments are finally joined with a plain space or a shell line continuation.
Rendering is pure and cannot fail: everything was validated while decoding.
"""
import logging
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..MODELS.container_inspect import ContainerInspect, Device, PortBinding, RestartPolicy
from ..MODELS.image_inspect import ImageInspect
from ..MODELS.render_options import RenderOptions

logger = logging.getLogger(__name__)

# Docker applies these when --network is not given
DEFAULT_NETWORK_MODES = {"default", "bridge"}
DEFAULT_CGROUP_PERMISSIONS = "rwm"
WILDCARD_HOST_IPS = {"0.0.0.0", "::"}
WILDCARD_HOST_PORT = "0"

Rule = Tuple[str, Callable[[], bool], Callable[[], List[str]]]


def render_restart_policy(policy: RestartPolicy) -> Optional[str]:
    """
    Renders the value of --restart, or None when the policy needs no flag.
    """
    if policy.name in ("always", "unless-stopped"):
        return policy.name
    if policy.name == "on-failure":
        return f"on-failure:{policy.maximum_retry_count}"
    return None


def render_device(device: Device) -> str:
    """Renders the value of --device, dropping the default permissions."""
    value = f"{device.path_on_host}:{device.path_in_container}"
    if device.cgroup_permissions != DEFAULT_CGROUP_PERMISSIONS:
        value = f"{value}:{device.cgroup_permissions}"
    return value


def is_published(binding: PortBinding) -> bool:
    """
    True when a binding pins a concrete host address and port.

    Wildcards mean Docker picked the address or port itself, so there is
    nothing fixed to reproduce.
    """
    if binding.host_port is None or binding.host_ip is None:
        return False
    return binding.host_port != WILDCARD_HOST_PORT and binding.host_ip not in WILDCARD_HOST_IPS


def render_ports(ports: Mapping[str, Sequence[PortBinding]]) -> List[str]:
    """
    Renders --expose and -p flags for the container's port map.

    Keys are "<port>/<proto>"; malformed keys are skipped.
    """
    fragments = []
    for key in sorted(ports):
        parts = key.split("/")
        if len(parts) != 2:
            logger.debug("Skipping malformed port key %r", key)
            continue
        port, protocol = parts
        is_tcp = protocol.lower() == "tcp"

        bindings = ports[key]
        if not bindings:
            fragments.append(f"--expose={port}/{'' if is_tcp else 'udp'}")
            continue

        suffix = "" if is_tcp else "/udp"
        for binding in bindings:
            if is_published(binding):
                fragments.append(f"-p {binding.host_ip}:{binding.host_port}:{port}{suffix}")
    return fragments


def subtract(values: Iterable[str], baseline: Iterable[str]) -> List[str]:
    """
    Values not present in the baseline, in their original order, without duplicates.
    """
    excluded = set(baseline)
    result = []
    for value in values:
        if value not in excluded:
            result.append(value)
            excluded.add(value)
    return result


def quoted(flag: str, values: Iterable[str]) -> List[str]:
    """Renders a repeated flag with double-quoted values."""
    return [f'{flag}="{value}"' for value in values]


class RunCommandBuilder:
    """
    Builds the `docker run` invocation equivalent to an inspected container.
    """

    def __init__(
        self,
        container: ContainerInspect,
        image: Optional[ImageInspect] = None,
        options: Optional[RenderOptions] = None,
    ):
        """
        Initializes the builder.

        :param container: The container to rebuild.
        :param image: The container's image, used to leave out inherited settings.
        :param options: Rendering switches.
        """
        self.container = container
        self.image = image or ImageInspect()
        self.options = options or RenderOptions()

    def build(self) -> str:
        """
        Renders the full command line.

        :return: The command, without a trailing newline.
        """
        return self.options.separator.join(self.fragments())

    def fragments(self) -> List[str]:
        """
        Renders the command as ordered fragments, starting with "docker run".
        """
        fragments = ["docker run"]
        for name, applies, render in self._rules():
            if applies():
                rendered = render()
                logger.debug("Rule %s produced %d fragment(s)", name, len(rendered))
                fragments.extend(rendered)
        return fragments

    def volumes(self) -> List[str]:
        """Volumes to pass with --volume, minus those the image already declares."""
        container, image = self.container, self.image
        volumes = list(container.host_config.binds)
        baseline = list(image.host_config.binds)
        if self.options.merge_config_volumes:
            volumes.extend(container.config.volumes)
            baseline.extend(image.config.volumes)
        return subtract(volumes, baseline)

    def hostname_was_set(self) -> bool:
        """
        Docker names a container's host after its short ID unless told
        otherwise, so a hostname that prefixes the ID was not chosen.
        """
        return not self.container.id.startswith(self.container.config.hostname)

    def _rules(self) -> List[Rule]:
        container, image = self.container, self.image
        config = container.config
        host = container.host_config
        network = container.network_settings
        mac_address = config.mac_address or network.mac_address
        restart = render_restart_policy(host.restart_policy)

        return [
            ("name", lambda: self.options.include_name,
             lambda: [f"--name={container.display_name}"]),
            ("hostname", self.hostname_was_set,
             lambda: [f"--hostname={config.hostname}"]),
            ("user", lambda: config.user is not None,
             lambda: [f"--user={config.user}"]),
            ("mac-address", lambda: mac_address is not None,
             lambda: [f"--mac-address={mac_address}"]),
            ("pid", lambda: host.pid_mode is not None,
             lambda: [f"--pid={host.pid_mode}"]),
            ("cpuset-cpus", lambda: host.cpuset_cpus is not None,
             lambda: [f"--cpuset-cpus={host.cpuset_cpus}"]),
            ("cpuset-mems", lambda: host.cpuset_mems is not None,
             lambda: [f"--cpuset-mems={host.cpuset_mems}"]),
            ("env", lambda: True,
             lambda: quoted("--env", subtract(config.env, image.config.env))),
            ("volume", lambda: True,
             lambda: quoted("--volume", self.volumes())),
            ("volumes-from", lambda: True,
             lambda: quoted("--volumes-from", subtract(host.volumes_from, image.host_config.volumes_from))),
            ("cap-add", lambda: True,
             lambda: quoted("--cap-add", subtract(host.cap_add, image.host_config.cap_add))),
            ("cap-drop", lambda: True,
             lambda: quoted("--cap-drop", subtract(host.cap_drop, image.host_config.cap_drop))),
            ("dns", lambda: True,
             lambda: quoted("--dns", subtract(host.dns, image.host_config.dns))),
            ("network", lambda: host.network_mode not in DEFAULT_NETWORK_MODES,
             lambda: [f"--network={host.network_mode}"]),
            ("privileged", lambda: host.privileged,
             lambda: ["--privileged"]),
            ("workdir", lambda: config.working_dir is not None,
             lambda: [f"--workdir={config.working_dir}"]),
            ("restart", lambda: restart is not None,
             lambda: [f"--restart={restart}"]),
            ("device", lambda: True,
             lambda: [f"--device {render_device(device)}" for device in host.devices]),
            ("ports", lambda: True,
             lambda: render_ports(network.ports)),
            ("add-host", lambda: True,
             lambda: [f"--add-host {extra}" for extra in host.extra_hosts]),
            ("runtime", lambda: host.runtime is not None,
             lambda: [f"--runtime={host.runtime}"]),
            ("memory", lambda: host.memory != 0,
             lambda: [f'--memory="{host.memory}"']),
            ("memory-reservation", lambda: host.memory_reservation != 0,
             lambda: [f'--memory-reservation="{host.memory_reservation}"']),
            ("detach", lambda: not config.attach_stdout,
             lambda: ["--detach=true"]),
            ("tty", lambda: config.tty,
             lambda: ["-t"]),
            ("rm", lambda: host.auto_remove,
             lambda: ["--rm"]),
            ("image", lambda: True,
             lambda: [config.image]),
            ("command", lambda: bool(config.cmd),
             lambda: [" ".join(config.cmd)]),
        ]
