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

"""Error reporting for the pre-deploy validator."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..exceptions import ValidationFailedError


@dataclass(frozen=True)
class ValidationIssue:
    message: str
    # JSON-pointer-like location in the descriptor, e.g. "/functions/hello"
    yaml_path: Optional[str] = None


class ValidationReport:
    """Container for the content errors collected over all validation phases."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []

    def add_error(self, message: str, yaml_path: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            yaml_path: Optional location of the offending value
        """
        self.issues.append(ValidationIssue(message=message, yaml_path=yaml_path))

    def extend(self, messages: Iterable[str], yaml_path: Optional[str] = None):
        for message in messages:
            self.add_error(message, yaml_path=yaml_path)

    @property
    def errors(self) -> List[str]:
        """Collected messages, in the order they were found."""
        return [issue.message for issue in self.issues]

    @property
    def ok(self) -> bool:
        return not self.issues

    def raise_for_errors(self) -> None:
        """Raise a single batched failure if any error was collected."""
        if self.issues:
            raise ValidationFailedError(self.errors)

    def __len__(self) -> int:
        return len(self.issues)

    def __repr__(self) -> str:
        return f"ValidationReport(errors={self.errors!r})"
