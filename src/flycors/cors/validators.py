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
"""Pluggable validation steps used by the policy evaluator.

Each step has the :data:`Validator` shape: it reads the request, consults
the policy, records what it allows (or an error message) on the result and
returns ``result.is_valid``. Custom logic is swapped in per step::

    def allow_subdomains(request, policy, result):
        origin = request.get_header("Origin")
        if origin and origin.endswith(".example.com"):
            result.allowed_origin = origin
        else:
            result.error_messages.append(f"The origin '{origin}' is not allowed.")
        return result.is_valid

    evaluator = PolicyEvaluator(validators=PolicyValidators(origin=allow_subdomains))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from flycors.cors import constants
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest
from flycors.cors.result import EvaluationResult

Validator = Callable[[CORSRequest, CORSPolicy, EvaluationResult], bool]


def validate_origin(request: CORSRequest, policy: CORSPolicy, result: EvaluationResult) -> bool:
    """Record the allowed origin.

    Under an any-origin policy the answer is ``*``, except for credentialed
    policies, where the request origin is echoed back because the protocol
    forbids pairing a wildcard with credentials.
    """
    origin = request.get_header(constants.ORIGIN)
    if origin is None:
        result.error_messages.append(constants.ORIGIN_NOT_ALLOWED)
    elif policy.allow_any_origin:
        result.allowed_origin = origin if policy.supports_credentials else constants.ANY_ORIGIN
    elif origin in policy.origins:
        result.allowed_origin = origin
    else:
        result.error_messages.append(constants.ORIGIN_NOT_ALLOWED_FORMAT.format(origin=origin))
    return result.is_valid


def validate_method(request: CORSRequest, policy: CORSPolicy, result: EvaluationResult) -> bool:
    requested = request.get_header(constants.ACCESS_CONTROL_REQUEST_METHOD)
    if requested is not None and (policy.allow_any_method or requested in policy.methods):
        result.allowed_methods.append(requested)
    else:
        result.error_messages.append(constants.METHOD_NOT_ALLOWED)
    return result.is_valid


def validate_headers(request: CORSRequest, policy: CORSPolicy, result: EvaluationResult) -> bool:
    requested = request.get_comma_separated_values(constants.ACCESS_CONTROL_REQUEST_HEADERS)
    allowed = {h.lower() for h in policy.headers}
    if policy.allow_any_header or all(h.lower() in allowed for h in requested):
        result.allowed_headers.extend(requested)
    else:
        result.error_messages.append(constants.HEADERS_NOT_ALLOWED)
    return result.is_valid


@dataclass(frozen=True)
class PolicyValidators:
    """The three checks a :class:`PolicyEvaluator` runs, in order."""

    origin: Validator = validate_origin
    method: Validator = validate_method
    headers: Validator = validate_headers
