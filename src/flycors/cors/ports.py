# Copyright 2026 Firefly Software Solutions Inc.
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
"""CORSEngine — the port server integrations program against."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest
from flycors.cors.result import EvaluationResult


@runtime_checkable
class CORSEngine(Protocol):
    """Evaluates a policy for a particular request."""

    def evaluate(self, request: CORSRequest, policy: CORSPolicy) -> EvaluationResult:
        """Return the decision for *request*; rejections are in ``error_messages``."""
        ...
