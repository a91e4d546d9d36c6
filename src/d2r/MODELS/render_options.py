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
Options controlling how a container is rendered back into `docker run`.
"""
from pydantic import BaseModel


class RenderOptions(BaseModel):
    """
    Behavioral switches for the run command builder.
    """
    # Emit --name=
    include_name: bool = True

    # One flag per line, joined with a shell line continuation
    pretty: bool = False

    # Treat declared Config.Volumes as volumes to rebuild, next to the binds
    merge_config_volumes: bool = False

    @property
    def separator(self) -> str:
        """String placed between fragments."""
        return " \\\n\t" if self.pretty else " "
