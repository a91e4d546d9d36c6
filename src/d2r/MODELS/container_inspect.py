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
Models for the output of `docker container inspect`.

Only the fields that influence how a container runs are modelled. Field
aliases are Docker's own JSON keys, so documents validate as-is.
"""
from typing import Annotated, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from ..UTILS.normalizers import ByteCount, KeyList, OptionalStr, StrList, null_to_dict, null_to_list


class InspectModel(BaseModel):
    """
    Base for all inspect records: immutable, keyed by Docker's JSON names,
    unknown keys ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Device(InspectModel):
    """A host device mapped into the container."""
    path_on_host: StrictStr = Field(alias="PathOnHost")
    path_in_container: StrictStr = Field(alias="PathInContainer")
    cgroup_permissions: StrictStr = Field(alias="CgroupPermissions")


class RestartPolicy(InspectModel):
    """
    Restart policy of the container. ``name`` is one of "", "no", "always",
    "unless-stopped" or "on-failure".
    """
    name: StrictStr = Field(alias="Name")
    maximum_retry_count: StrictInt = Field(default=0, alias="MaximumRetryCount")


class PortBinding(InspectModel):
    """One host binding of a container port."""
    host_port: OptionalStr = Field(default=None, alias="HostPort")
    host_ip: OptionalStr = Field(default=None, alias="HostIp")


BindingList = Annotated[List[PortBinding], BeforeValidator(null_to_list)]
PortMap = Annotated[Dict[StrictStr, BindingList], BeforeValidator(null_to_dict)]


class ContainerConfig(InspectModel):
    """The ``Config`` section: what the process inside the container sees."""
    hostname: StrictStr = Field(alias="Hostname")
    user: OptionalStr = Field(default=None, alias="User")
    cmd: StrList = Field(default=[], alias="Cmd")
    image: StrictStr = Field(alias="Image")
    working_dir: OptionalStr = Field(default=None, alias="WorkingDir")
    mac_address: OptionalStr = Field(default=None, alias="MacAddress")
    tty: StrictBool = Field(alias="Tty")
    attach_stdout: StrictBool = Field(alias="AttachStdout")
    env: StrList = Field(default=[], alias="Env")
    volumes: KeyList = Field(default=[], alias="Volumes")


class HostConfig(InspectModel):
    """The ``HostConfig`` section: how the daemon set the container up."""
    network_mode: StrictStr = Field(alias="NetworkMode")
    runtime: OptionalStr = Field(default=None, alias="Runtime")
    cpuset_cpus: OptionalStr = Field(default=None, alias="CpusetCpus")
    cpuset_mems: OptionalStr = Field(default=None, alias="CpusetMems")
    pid_mode: OptionalStr = Field(default=None, alias="PidMode")
    auto_remove: StrictBool = Field(alias="AutoRemove")
    privileged: StrictBool = Field(alias="Privileged")

    binds: StrList = Field(default=[], alias="Binds")
    volumes_from: StrList = Field(default=[], alias="VolumesFrom")
    cap_add: StrList = Field(default=[], alias="CapAdd")
    cap_drop: StrList = Field(default=[], alias="CapDrop")
    dns: StrList = Field(default=[], alias="Dns")
    extra_hosts: StrList = Field(default=[], alias="ExtraHosts")

    # Bytes, 0 means no limit
    memory: ByteCount = Field(default=0, alias="Memory")
    memory_reservation: ByteCount = Field(default=0, alias="MemoryReservation")

    devices: Annotated[List[Device], BeforeValidator(null_to_list)] = Field(default=[], alias="Devices")
    restart_policy: RestartPolicy = Field(alias="RestartPolicy")


class NetworkSettings(InspectModel):
    """The ``NetworkSettings`` section. Port keys look like "80/tcp"."""
    mac_address: OptionalStr = Field(default=None, alias="MacAddress")
    ports: PortMap = Field(default={}, alias="Ports")


class ContainerInspect(InspectModel):
    """
    A single container as reported by `docker container inspect`.
    """
    id: StrictStr = Field(default="", alias="Id")
    name: StrictStr = Field(alias="Name")
    config: ContainerConfig = Field(alias="Config")
    host_config: HostConfig = Field(alias="HostConfig")
    network_settings: NetworkSettings = Field(alias="NetworkSettings")

    @property
    def display_name(self) -> str:
        """Container name without the leading "/" Docker stores."""
        return self.name.lstrip("/")
