# Copyright 2025 TIER IV, inc.
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

from collections.abc import Mapping
from typing import Any, List

from ..exceptions import EnvironmentVariablesError


def validate_env(variables: Any) -> List[str]:
    """Validate namespace environment variables.

    Returns one error per non-string value, in declaration order. An empty or
    missing map is valid.

    Raises:
        EnvironmentVariablesError: If ``variables`` is set but is not a mapping
    """
    errors: List[str] = []

    if not variables:
        return errors
    if not isinstance(variables, Mapping):
        raise EnvironmentVariablesError(
            'Environment variables should be a map of strings under the form: key - value'
        )

    for name, value in variables.items():
        if not isinstance(value, str):
            errors.append(f"Variable {name}: variable is invalid, environment variables may only be strings")

    return errors
