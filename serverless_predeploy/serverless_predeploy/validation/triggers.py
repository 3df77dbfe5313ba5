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

"""Trigger (event) validation for functions and containers.

A trigger is a single-key mapping from its kind to a kind-specific payload::

    events:
      - schedule:
          rate: '1 * * * *'

Each kind has a validator registered in ``TriggerValidatorFactory``; adding a
kind means adding a validator class and one registry entry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence, Type

import jsonschema
from jsonschema.exceptions import ValidationError as SchemaValidationError

from ..exceptions import TriggerValidationError
from ..models.json_schema_loader import load_schema
from .cron import is_valid_cron


class TriggerKind:
    """Trigger kinds supported by the serverless platform."""
    SCHEDULE = "schedule"


class BaseTriggerValidator(ABC):
    """Abstract base validator for one trigger kind."""

    TRIGGER_KIND: str

    @classmethod
    def get_trigger_kind(cls) -> str:
        trigger_kind = getattr(cls, "TRIGGER_KIND", None)
        if not isinstance(trigger_kind, str) or not trigger_kind:
            raise NotImplementedError("Trigger validator must define TRIGGER_KIND")
        return trigger_kind

    def validate_payload_shape(self, payload: Any) -> None:
        """Validate the payload against the packaged JSON Schema for this kind.

        Raises:
            SchemaValidationError: If the payload does not match
        """
        schema = load_schema(self.get_trigger_kind())
        jsonschema.validate(instance=payload, schema=schema)

    @abstractmethod
    def validate(self, payload: Any) -> None:
        """Validate a trigger payload.

        Raises:
            TriggerValidationError: With a user-facing message if invalid
        """


class ScheduleTriggerValidator(BaseTriggerValidator):
    """Validator for cron schedule triggers."""

    TRIGGER_KIND = TriggerKind.SCHEDULE

    def validate(self, payload: Any) -> None:
        rate = payload.get("rate") if isinstance(payload, Mapping) else None
        try:
            self.validate_payload_shape(payload)
        except SchemaValidationError:
            raise self._invalid(rate) from None

        if not is_valid_cron(rate):
            raise self._invalid(rate)

    @staticmethod
    def _invalid(rate: Any) -> TriggerValidationError:
        return TriggerValidationError(
            f"Trigger Schedule is invalid: {rate}, schedule should be formatted like "
            f"a UNIX-Compliant Cronjob, for example: '1 * * * *'"
        )


class TriggerValidatorFactory:
    """Factory for trigger validators."""

    _validators: Dict[str, Type[BaseTriggerValidator]] = {
        TriggerKind.SCHEDULE: ScheduleTriggerValidator,
    }

    @classmethod
    def supported_kinds(cls) -> List[str]:
        return list(cls._validators.keys())

    @classmethod
    def is_supported(cls, trigger_kind: str) -> bool:
        return trigger_kind in cls._validators

    @classmethod
    def get_validator(cls, trigger_kind: str) -> BaseTriggerValidator:
        if trigger_kind not in cls._validators:
            raise TriggerValidationError(cls._unsupported_message(trigger_kind))
        return cls._validators[trigger_kind]()

    @classmethod
    def _unsupported_message(cls, trigger_kind: str) -> str:
        return (
            f"Trigger Type {trigger_kind} is not currently supported by Scaleway's Serverless platform, "
            f"supported types are the following: {', '.join(cls.supported_kinds())}"
        )


def validate_trigger(trigger: Any) -> None:
    """Validate a single trigger.

    Raises:
        TriggerValidationError: If the trigger is invalid
    """
    if not isinstance(trigger, Mapping) or len(trigger) != 1:
        raise TriggerValidationError(
            'Trigger is invalid, it should contain exactly one event type configuration (example: schedule).'
        )

    trigger_kind = next(iter(trigger))
    validator = TriggerValidatorFactory.get_validator(trigger_kind)
    validator.validate(trigger[trigger_kind])


def validate_triggers(triggers: Sequence[Any]) -> List[str]:
    """Validate triggers in order and return one message per invalid trigger."""
    errors: List[str] = []
    for trigger in triggers:
        try:
            validate_trigger(trigger)
        except TriggerValidationError as e:
            errors.append(str(e))
    return errors
