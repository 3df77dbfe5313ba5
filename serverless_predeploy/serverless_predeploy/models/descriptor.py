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

"""In-memory view of an already-parsed service deployment descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Credentials:
    token: Any
    project_id: Any


@dataclass
class ServiceDescriptor:
    """Service descriptor as seen by the validator.

    Nested mappings are kept by reference: the only change the validator
    makes is defaulting a missing ``events`` list on functions and
    containers, and that change must be visible to the caller.
    """

    service_path: Optional[str] = None
    provider: Dict[str, Any] = field(default_factory=dict)
    functions: Optional[Dict[str, Any]] = None
    custom: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], service_path: Optional[str] = None) -> 'ServiceDescriptor':
        """Build a descriptor from a serverless.yml-shaped mapping."""
        provider = data.get("provider")
        return cls(
            service_path=service_path,
            provider=provider if isinstance(provider, dict) else {},
            functions=data.get("functions"),
            custom=data.get("custom"),
        )

    @property
    def runtime(self) -> Optional[str]:
        return self.provider.get("runtime")

    @property
    def env(self) -> Any:
        return self.provider.get("env")

    @property
    def containers(self) -> Optional[Dict[str, Any]]:
        if not self.custom or not isinstance(self.custom, dict):
            return None
        return self.custom.get("containers")
