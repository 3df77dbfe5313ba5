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

"""Supported function runtimes and their handler file extensions."""

from typing import Dict, List, Optional


class Runtime:
    """Runtime identifiers accepted by the serverless platform."""
    NODE8 = "node8"
    NODE10 = "node10"
    NODE14 = "node14"
    PYTHON = "python"
    PYTHON3 = "python3"
    GOLANG = "golang"


# Extensions are tried in order when resolving a handler file.
RUNTIMES_EXTENSIONS: Dict[str, List[str]] = {
    Runtime.NODE8: ['ts', 'js'],
    Runtime.NODE10: ['ts', 'js'],
    Runtime.NODE14: ['ts', 'js'],
    Runtime.PYTHON: ['py'],
    Runtime.PYTHON3: ['py'],
    Runtime.GOLANG: ['go'],
}


def supported_runtimes() -> List[str]:
    return list(RUNTIMES_EXTENSIONS.keys())


def get_extensions(runtime: Optional[str]) -> Optional[List[str]]:
    """Return the handler extensions for ``runtime``, or None if unsupported."""
    if not isinstance(runtime, str):
        return None
    return RUNTIMES_EXTENSIONS.get(runtime)


def is_supported_runtime(runtime: Optional[str]) -> bool:
    return get_extensions(runtime) is not None
