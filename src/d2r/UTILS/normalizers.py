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
Normalization of Docker's JSON quirks, applied while decoding inspect output.

Docker encodes "unset" strings as "" and empty collections as null. These
helpers are used as pydantic ``BeforeValidator`` hooks so that every model
field gets the same treatment.
"""
from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, Field, StrictInt, StrictStr


def empty_string_is_none(value: Any) -> Any:
    """
    Maps "" to None. Anything else is passed through for normal validation.
    """
    if value == "":
        return None
    return value


def null_to_list(value: Any) -> Any:
    """Maps null to an empty list."""
    if value is None:
        return []
    return value


def null_to_dict(value: Any) -> Any:
    """Maps null to an empty dict."""
    if value is None:
        return {}
    return value


def null_to_zero(value: Any) -> Any:
    """Maps null to 0."""
    if value is None:
        return 0
    return value


def mapping_keys(value: Any) -> Any:
    """
    Collapses a ``{"/path": {}}`` object (Docker's ``Volumes`` encoding)
    into the list of its keys. null becomes an empty list.
    """
    if value is None:
        return []
    if isinstance(value, dict):
        return list(value.keys())
    return value


OptionalStr = Annotated[Optional[StrictStr], BeforeValidator(empty_string_is_none)]
StrList = Annotated[List[StrictStr], BeforeValidator(null_to_list)]
KeyList = Annotated[List[StrictStr], BeforeValidator(mapping_keys)]
ByteCount = Annotated[StrictInt, Field(ge=0), BeforeValidator(null_to_zero)]
