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

"""Handler reference resolution.

A handler is written ``path/to/file.exportedSymbol``. Resolving it means
finding ``path/to/file.<ext>`` on disk for one of the runtime's extensions.
Only existence is checked; the file is never opened.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from ..exceptions import HandlerResolutionError

logger = logging.getLogger(__name__)


def split_handler(handler_ref: Any) -> Tuple[str, str]:
    """Split a handler reference into (file path, exported symbol)."""
    # example: 'src/handler.main' -> ('src/handler', 'main')

    if not isinstance(handler_ref, str):
        raise HandlerResolutionError(f"Handler must be a string, got: {handler_ref!r}")

    parts = handler_ref.split(".")
    if len(parts) != 2:
        raise HandlerResolutionError(
            f"Invalid handler format: '{handler_ref}'. Expected 'path/to/file.functionInsideFile'"
        )

    file_path, symbol = parts
    return file_path, symbol


def find_handler_file(
    handler_ref: Any,
    extensions: Optional[Sequence[str]],
    root: Union[str, Path, None] = None,
) -> Path:
    """Return the first existing file backing ``handler_ref``.

    Raises:
        HandlerResolutionError: If the reference is malformed, no extension
            list is available, or no candidate file exists
    """
    file_path, _ = split_handler(handler_ref)

    if extensions is None:
        raise HandlerResolutionError(f"No file extensions known for handler '{handler_ref}'")

    base_dir = Path(root) if root is not None else Path.cwd()
    for extension in extensions:
        candidate = base_dir / f"{file_path}.{extension}"
        try:
            exists = candidate.exists()
        except (OSError, ValueError) as e:
            # Name too long, embedded NUL byte: no such file can exist
            logger.debug(f"Cannot check handler candidate {candidate!r}: {e}")
            exists = False
        if exists:
            return candidate

    raise HandlerResolutionError(f"File does not exist for handler '{handler_ref}'")


def resolve_handler(
    handler_ref: Any,
    extensions: Optional[Sequence[str]],
    root: Union[str, Path, None] = None,
) -> bool:
    """Check whether a source file backs ``handler_ref``.

    Args:
        handler_ref: Handler reference, e.g. ``path/to/file.handler``
        extensions: Extensions accepted by the runtime, tried in order.
            ``None`` (unknown runtime) always fails.
        root: Directory handler paths are relative to (default: cwd)

    Returns:
        True if a candidate file exists
    """
    try:
        found = find_handler_file(handler_ref, extensions, root=root)
    except HandlerResolutionError as e:
        logger.debug(str(e))
        return False

    logger.debug(f"Handler '{handler_ref}' resolved to {found}")
    return True
