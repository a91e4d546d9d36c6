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
Errors raised while acquiring and decoding inspect documents.

Rendering never fails, so every error here comes from the docker CLI
or from the JSON it produced.
"""


class D2RError(Exception):
    """Base class for all d2r errors."""


class ToolUnavailable(D2RError):
    """The docker CLI could not be launched."""


class InspectionFailed(D2RError):
    """The docker CLI ran but reported an error (e.g. no such container)."""


class EmptyInput(D2RError):
    """There was nothing to parse."""


class SchemaError(D2RError, ValueError):
    """The JSON parsed but does not have the shape of an inspect document."""
