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

"""Pre-deploy validation of a service descriptor.

Phases run in a fixed order:

1. service path   - fatal, raises ``ServicePathError``
2. credentials    - fatal, raises ``CredentialsError``
3. namespace      - environment variables, errors collected
4. applications   - functions and containers, errors collected

Collected errors are returned together in a ``ValidationReport`` so that the
user can fix every problem in one pass.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config.validator_config import ValidatorConfig, validator_config
from .models.descriptor import Credentials, ServiceDescriptor
from .validation.applications import validate_applications
from .validation.environment import validate_env
from .validation.preconditions import validate_credentials, validate_service_path
from .validation.report import ValidationReport

logger = logging.getLogger(__name__)


class DeploymentValidator:
    """Runs all validation phases against one service descriptor."""

    def __init__(
        self,
        descriptor: ServiceDescriptor,
        credentials: Credentials,
        config: Optional[ValidatorConfig] = None,
        handler_root: Union[str, Path, None] = None,
    ):
        """Initialize the validator.

        Args:
            descriptor: Parsed service descriptor
            credentials: Access token and project id used for the deploy
            config: Validator configuration (default: from environment)
            handler_root: Directory handler paths are relative to (default: cwd)
        """
        self.descriptor = descriptor
        self.credentials = credentials
        self.config = config if config is not None else validator_config
        self.handler_root = handler_root

    def validate(self) -> ValidationReport:
        """Run every phase and return the collected content errors.

        Raises:
            ServicePathError: If no service directory is set
            CredentialsError: If the token or project id is malformed
            EnvironmentVariablesError: If provider env is not a mapping
        """
        self.validate_service_path()
        self.validate_credentials()

        report = ValidationReport()
        self.validate_namespace(report)
        self.validate_applications(report)

        if report.ok:
            logger.info("Service descriptor is valid")
        else:
            logger.warning(f"Service descriptor has {len(report)} error(s)")
        return report

    def validate_service_path(self) -> None:
        logger.debug("Checking service path")
        validate_service_path(self.descriptor.service_path)

    def validate_credentials(self) -> None:
        logger.debug("Checking credentials")
        validate_credentials(self.credentials, credential_length=self.config.credential_length)

    def validate_namespace(self, report: ValidationReport) -> ValidationReport:
        logger.debug("Validating namespace environment variables")
        report.extend(validate_env(self.descriptor.env), yaml_path="/provider/env")
        return report

    def validate_applications(self, report: ValidationReport) -> ValidationReport:
        logger.debug("Validating functions and containers")
        report.extend(validate_applications(self.descriptor, root=self.handler_root))
        return report


def validate(
    descriptor: ServiceDescriptor,
    credentials: Credentials,
    config: Optional[ValidatorConfig] = None,
    handler_root: Union[str, Path, None] = None,
) -> ValidationReport:
    """Validate a service descriptor before deployment.

    Returns:
        ValidationReport; ``report.ok`` is False if any content error was found
    """
    return DeploymentValidator(descriptor, credentials, config=config, handler_root=handler_root).validate()
