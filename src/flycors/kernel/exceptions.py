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
"""Exception hierarchy for flycors.

All library exceptions inherit from FlyCORSException. Only configuration
mistakes are raised; a rejected CORS request is never an exception and is
reported through ``EvaluationResult.error_messages`` instead.

Categories:
- CORSConfigurationException: invalid policy values (e.g. negative max-age)
- PolicyNotFoundException: a named policy lookup that has no match
"""

from __future__ import annotations


class FlyCORSException(Exception):
    """Base exception for all flycors errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_CONFIG_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class CORSConfigurationException(FlyCORSException):
    """A policy or result was given a value the CORS protocol cannot express."""


class PolicyNotFoundException(FlyCORSException):
    """No policy is registered under the requested name."""
