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

"""Validation rules for service descriptors."""

from .applications import validate_applications
from .environment import validate_env
from .handlers import resolve_handler
from .preconditions import validate_credentials, validate_service_path
from .report import ValidationIssue, ValidationReport
from .triggers import TriggerKind, TriggerValidatorFactory, validate_triggers

__all__ = [
    'TriggerKind',
    'TriggerValidatorFactory',
    'ValidationIssue',
    'ValidationReport',
    'resolve_handler',
    'validate_applications',
    'validate_credentials',
    'validate_env',
    'validate_service_path',
    'validate_triggers',
]
