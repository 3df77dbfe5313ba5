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

"""Cron expression grammar accepted by schedule triggers.

Five space-separated fields, each either ``*``, a number in range, or
``*/n`` with ``n`` in the same range:

  minute (0-59)  hour (0-23)  day-of-month (1-31)  month (1-12)  day-of-week (0-6)

Lists (``1,2``) and ranges (``1-5``) are not accepted by the platform.
"""

import re
from typing import Any

_MINUTE = r"[0-9]|[1-5][0-9]"
_HOUR = r"[0-9]|1[0-9]|2[0-3]"
_DAY_OF_MONTH = r"[1-9]|[12][0-9]|3[01]"
_MONTH = r"[1-9]|1[0-2]"
_DAY_OF_WEEK = r"[0-6]"


def _field(values: str) -> str:
    return rf"(\*|(?:{values})|\*/(?:{values}))"


CRON_SCHEDULE_RE = re.compile(
    " ".join(_field(values) for values in (_MINUTE, _HOUR, _DAY_OF_MONTH, _MONTH, _DAY_OF_WEEK))
)


def is_valid_cron(rate: Any) -> bool:
    if not isinstance(rate, str):
        return False
    return CRON_SCHEDULE_RE.fullmatch(rate) is not None
