# Copyright 2026 TIER IV, inc.
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

"""Error collection for a single validation run."""

from typing import Dict, List, Mapping, Sequence


class ValidationResult:
    """Ordered, path-keyed collection of validation errors.

    Messages raised at the same path are appended, never replaced. Paths keep
    the order in which they first received an error.
    """

    def __init__(self):
        self.path_errors: Dict[str, List[str]] = {}

    def add_error(self, path: str, message: str):
        """Record a message at a path.

        Args:
            path: Location of the offending value (e.g. ``.tags[2]``)
            message: Human readable description of the mismatch
        """
        self.path_errors.setdefault(path, []).append(message)

    def merge_errors(self, other_errors: Mapping[str, Sequence[str]]):
        """Append every message of another result, keeping its paths."""
        for path, messages in other_errors.items():
            self.path_errors.setdefault(path, []).extend(messages)

    @property
    def errors(self) -> List[str]:
        return [
            f"at {path} {message}"
            for path, messages in self.path_errors.items()
            for message in messages
        ]

    @property
    def successful(self) -> bool:
        return not self.path_errors

    @property
    def failure(self) -> bool:
        return bool(self.path_errors)

    def __str__(self) -> str:
        return "\n".join(self.errors)

    def __repr__(self) -> str:
        return f"ValidationResult(path_errors={self.path_errors!r})"
