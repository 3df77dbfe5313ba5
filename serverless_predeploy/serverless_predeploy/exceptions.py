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

"""Custom exceptions for the pre-deploy validator."""

from typing import List, Sequence


class PredeployError(Exception):
    """Base exception for pre-deploy validation errors."""
    pass


class ServicePathError(PredeployError):
    """Exception raised when no service directory is established."""
    pass


class CredentialsError(PredeployError):
    """Exception raised when the access token or project id is malformed."""
    pass


class EnvironmentVariablesError(PredeployError):
    """Exception raised when namespace environment variables are not a map."""
    pass


class TriggerValidationError(PredeployError):
    """Exception raised by a trigger-kind validator for an invalid payload."""
    pass


class HandlerResolutionError(PredeployError):
    """Exception raised when a handler reference cannot be resolved to a file."""
    pass


class ValidationFailedError(PredeployError):
    """Exception carrying every content error collected during validation."""

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("\n".join(self.errors))
