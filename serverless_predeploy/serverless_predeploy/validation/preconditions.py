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

"""Environment-level checks that must hold before the descriptor is inspected."""

from typing import Any, Optional

from ..config.validator_config import validator_config
from ..exceptions import CredentialsError, ServicePathError
from ..models.descriptor import Credentials


def validate_service_path(service_path: Optional[str]) -> None:
    if not service_path:
        raise ServicePathError('This command can only be run inside a service directory')


def _has_length(value: Any, length: int) -> bool:
    return isinstance(value, str) and len(value) == length


def validate_credentials(credentials: Credentials, credential_length: Optional[int] = None) -> None:
    """Check that both the token and the project id have the expected length.

    Only the length is checked, never the characters themselves.

    Raises:
        CredentialsError: If either value is not a string of ``credential_length``
    """
    if credential_length is None:
        credential_length = validator_config.credential_length

    if not _has_length(credentials.token, credential_length) or \
            not _has_length(credentials.project_id, credential_length):
        raise CredentialsError(''.join([
            'Either "scwToken" or "scwProject" is invalid.',
            ' Credentials to deploy on your Scaleway Account are required, please read the documentation.',
        ]))
