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
Acquisition of the container and image records to rebuild a command from.
"""
import logging
from typing import Optional, TextIO, Tuple

from ..errors import EmptyInput
from ..MODELS.container_inspect import ContainerInspect
from ..MODELS.image_inspect import ImageInspect
from ..PARSERS.inspect_parser import InspectParser
from ..RUNNERS.docker_inspector import DockerInspector

logger = logging.getLogger(__name__)


class InspectionManager:
    """
    Loads a container, and its image when possible, from docker or from a stream.
    """

    def __init__(self, inspector: Optional[DockerInspector] = None, parser: Optional[InspectParser] = None):
        """
        Initializes the manager.

        :param inspector: Used to call docker; a default one is created if omitted.
        :param parser: Used to decode the JSON documents.
        """
        self.inspector = inspector or DockerInspector()
        self.parser = parser or InspectParser()

    def load(self, container: Optional[str] = None,
             stream: Optional[TextIO] = None) -> Tuple[ContainerInspect, ImageInspect]:
        """
        Loads the records to rebuild from.

        A container reference takes precedence over the stream. When reading
        from a stream, the image is not looked up and an empty baseline is used.

        :param container: Name or ID of the container to inspect.
        :param stream: Stream holding `docker container inspect` output.
        :return: The container and its image.
        """
        if container:
            return self.load_from_docker(container)
        if stream is not None:
            return self.load_from_stream(stream)
        raise EmptyInput("No output from docker inspect")

    def load_from_docker(self, container: str) -> Tuple[ContainerInspect, ImageInspect]:
        """Inspects a container, then the image it was created from."""
        inspect = self.parser.parse_container(self.inspector.inspect_container(container))
        logger.debug("Container %s uses image %s", inspect.display_name, inspect.config.image)
        image = self.parser.parse_image(self.inspector.inspect_image(inspect.config.image))
        return inspect, image

    def load_from_stream(self, stream: TextIO) -> Tuple[ContainerInspect, ImageInspect]:
        """Decodes container inspect output from a stream."""
        content = stream.read()
        logger.debug("Read %d characters from stream", len(content))
        return self.parser.parse_container(content), ImageInspect()
