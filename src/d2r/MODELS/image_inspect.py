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
Models for the output of `docker image inspect`.

An image only matters as a baseline: settings a container merely inherited
from its image are left out of the rebuilt command.
"""
from typing import Annotated

from pydantic import BeforeValidator, Field

from .container_inspect import InspectModel
from ..UTILS.normalizers import KeyList, StrList, null_to_dict


class ImageConfig(InspectModel):
    """Defaults baked into the image's ``Config``."""
    env: StrList = Field(default=[], alias="Env")
    volumes: KeyList = Field(default=[], alias="Volumes")


class ImageHostConfig(InspectModel):
    """Host configuration defaults, present in some inspect variants."""
    binds: StrList = Field(default=[], alias="Binds")
    volumes_from: StrList = Field(default=[], alias="VolumesFrom")
    cap_add: StrList = Field(default=[], alias="CapAdd")
    cap_drop: StrList = Field(default=[], alias="CapDrop")
    dns: StrList = Field(default=[], alias="Dns")


class ImageInspect(InspectModel):
    """
    A single image as reported by `docker image inspect`.

    ``ImageInspect()`` is the empty baseline used when no image was looked up.
    """
    config: Annotated[ImageConfig, BeforeValidator(null_to_dict)] = Field(
        default_factory=ImageConfig, alias="Config"
    )
    host_config: Annotated[ImageHostConfig, BeforeValidator(null_to_dict)] = Field(
        default_factory=ImageHostConfig, alias="HostConfig"
    )
