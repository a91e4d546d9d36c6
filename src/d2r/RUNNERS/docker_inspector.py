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
Invocation of `docker ... inspect` as a subprocess.
"""
import logging
import subprocess
from typing import List, Optional

from ..errors import InspectionFailed, ToolUnavailable

logger = logging.getLogger(__name__)


class DockerInspector:
    """
    Runs the docker CLI to fetch inspect documents. Read-only: only
    `inspect` subcommands are ever executed.
    """

    def __init__(self, docker_bin: str = "docker", timeout: Optional[float] = None):
        """
        Initializes the inspector.

        Args:
            docker_bin (str): Name or path of the docker executable.
            timeout (Optional[float]): Seconds to wait for each call, None to wait forever.
        """
        self.docker_bin = docker_bin
        self.timeout = timeout

    def inspect_container(self, reference: str) -> str:
        """
        Returns the JSON printed by `docker container inspect <reference>`.
        """
        return self._inspect("container", reference)

    def inspect_image(self, reference: str) -> str:
        """
        Returns the JSON printed by `docker image inspect <reference>`.
        """
        return self._inspect("image", reference)

    def _inspect(self, kind: str, reference: str) -> str:
        command: List[str] = [self.docker_bin, kind, "inspect", reference]
        logger.debug("Running: %s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                shell=False,
            )
        except subprocess.TimeoutExpired as e:
            raise InspectionFailed(f"'{' '.join(command)}' timed out after {e.timeout} seconds") from e
        except OSError as e:
            raise ToolUnavailable(f"{self.docker_bin} is not installed or not executable: {e}") from e

        stderr = (result.stderr or "").strip()
        if result.returncode != 0 or stderr:
            raise InspectionFailed(self._clean_error(stderr) or f"{self.docker_bin} exited with status {result.returncode}")
        return result.stdout

    @staticmethod
    def _clean_error(message: str) -> str:
        """Strips the "Error:" prefix docker puts in front of its messages."""
        if message.startswith("Error:"):
            message = message[len("Error:"):]
        return message.strip()
