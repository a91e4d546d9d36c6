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
Parsers for `docker container inspect` and `docker image inspect` output.
"""
import json
import logging
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..errors import EmptyInput, SchemaError
from ..MODELS.container_inspect import ContainerInspect
from ..MODELS.image_inspect import ImageInspect

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class InspectParser:
    """
    Parser for the JSON arrays printed by `docker ... inspect`.

    Docker always prints an array, even for a single object. Only the
    first element is decoded; anything after it is ignored.
    """

    def parse_container(self, content: Union[str, bytes]) -> ContainerInspect:
        """
        Parses container inspect output.

        :param content: Raw JSON text or bytes.
        :return: The first container in the document.
        """
        return self._parse_first(content, ContainerInspect, "docker container inspect")

    def parse_image(self, content: Union[str, bytes]) -> ImageInspect:
        """
        Parses image inspect output.

        :param content: Raw JSON text or bytes.
        :return: The first image in the document.
        """
        return self._parse_first(content, ImageInspect, "docker image inspect")

    def _parse_first(self, content: Union[str, bytes], model: Type[ModelT], source: str) -> ModelT:
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SchemaError(f"Failed to parse '{source}' output: invalid UTF-8: {e}") from e
        if not content.strip():
            raise EmptyInput(f"No output from {source}")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaError(f"Failed to parse '{source}' output: {e}") from e

        first = self._first_element(data, source)
        try:
            parsed = model.model_validate(first)
        except ValidationError as e:
            raise SchemaError(f"Failed to parse '{source}' output: {e}") from e

        logger.debug("Decoded %s from %s (%d element(s))", model.__name__, source, len(data))
        return parsed

    @staticmethod
    def _first_element(data: Any, source: str) -> Any:
        if not isinstance(data, list):
            raise SchemaError(f"Failed to parse '{source}' output: expected a JSON array, got {type(data).__name__}")
        if not data:
            raise SchemaError(f"Failed to parse '{source}' output: empty array")
        return data[0]
