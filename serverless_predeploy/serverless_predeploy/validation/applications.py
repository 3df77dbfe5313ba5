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

"""Validation of the functions and containers declared by a service."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..models.descriptor import ServiceDescriptor
from ..models.runtimes import Runtime, get_extensions, supported_runtimes
from .handlers import resolve_handler
from .triggers import validate_triggers

logger = logging.getLogger(__name__)


def _unsupported_runtime_message(runtime: Optional[str]) -> str:
    return (
        f"Runtime {runtime} is not supported. "
        f"Function runtime must be one of the following: {', '.join(supported_runtimes())}"
    )


def _normalize_events(spec: Any) -> Any:
    """Default a missing ``events`` entry to an empty list on the caller's mapping."""
    if not isinstance(spec, dict):
        return []
    if spec.get("events") is None:
        spec["events"] = []
    return spec["events"]


def _validate_events(kind: str, name: str, spec: Any) -> List[str]:
    events = _normalize_events(spec)
    if not isinstance(events, list):
        return [f"Events for {kind} {name} must be a list of triggers."]
    return validate_triggers(events)


def _validate_function(
    name: str,
    func: Any,
    default_runtime: Optional[str],
    root: Union[str, Path, None],
) -> List[str]:
    errors: List[str] = []
    spec: Dict[str, Any] = func if isinstance(func, dict) else {}
    runtime = spec.get("runtime")

    # Go sources are built as a package, there is no handler file per function
    if runtime == Runtime.GOLANG or (not runtime and default_runtime == Runtime.GOLANG):
        logger.debug(f"Skipping handler and trigger checks for golang function '{name}'")
        return errors

    if runtime and get_extensions(runtime) is None:
        # Names the service runtime, not the override. Kept as-is for
        # compatibility with existing deploy output.
        errors.append(_unsupported_runtime_message(default_runtime))

    # Handler files are looked up with the service runtime's extensions
    handler = spec.get("handler")
    if not resolve_handler(handler, get_extensions(default_runtime), root=root):
        errors.append(f"Handler file defined for function {name} does not exist ({handler}).")

    errors.extend(_validate_events("function", name, func))
    return errors


def validate_applications(descriptor: ServiceDescriptor, root: Union[str, Path, None] = None) -> List[str]:
    """Validate every function and container of the service.

    Args:
        descriptor: Service descriptor
        root: Directory handler paths are relative to (default: cwd)

    Returns:
        Ordered list of error messages, empty if everything is valid
    """
    errors: List[str] = []
    function_names: List[str] = []
    container_names: List[str] = []

    functions = descriptor.functions
    if functions and isinstance(functions, dict):
        function_names = list(functions.keys())
        default_runtime = descriptor.runtime

        if get_extensions(default_runtime) is None:
            errors.append(_unsupported_runtime_message(default_runtime))

        for function_name in function_names:
            errors.extend(_validate_function(function_name, functions[function_name], default_runtime, root))

    containers = descriptor.containers
    if containers and isinstance(containers, dict):
        container_names = list(containers.keys())

        # Containers ship an image, only their triggers are checked
        for container_name in container_names:
            errors.extend(_validate_events("container", container_name, containers[container_name]))

    if not function_names and not container_names:
        errors.append('You must define at least one function or container to deploy under the functions or custom key.')

    logger.debug(
        f"Validated {len(function_names)} function(s) and {len(container_names)} container(s): "
        f"{len(errors)} error(s)"
    )
    return errors
