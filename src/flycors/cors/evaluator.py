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
"""PolicyEvaluator — decides what cross-origin access a policy grants a request.

Evaluation order:
1. Origin: always checked; a rejected origin ends evaluation.
2. Preflight requests: requested method, then requested headers, then
   the policy's max-age. The first rejection ends evaluation.
3. Actual (non-preflight) requests: the policy's exposed headers are
   copied through; no method or header checks apply.

Evaluation is synchronous and does not mutate its inputs, so one evaluator
and one policy can serve concurrent requests.
"""

from __future__ import annotations

import structlog

from flycors.cors import constants
from flycors.cors.options import CORSOptions
from flycors.cors.policy import CORSPolicy
from flycors.cors.request import CORSRequest, is_preflight
from flycors.cors.result import EvaluationResult
from flycors.cors.validators import PolicyValidators

logger = structlog.get_logger("flycors.cors.evaluator")


class PolicyEvaluator:
    """Default :class:`~flycors.cors.ports.CORSEngine` implementation.

    Args:
        validators: Replacement checks for origin, method and headers.
            Defaults to the standard CORS rules.
        options: Policy store used by :meth:`evaluate_policy` to resolve
            policies by name.
    """

    def __init__(
        self,
        validators: PolicyValidators | None = None,
        options: CORSOptions | None = None,
    ) -> None:
        self._validators = validators or PolicyValidators()
        self._options = options

    def evaluate(self, request: CORSRequest, policy: CORSPolicy) -> EvaluationResult:
        result = EvaluationResult()
        checks = self._validators

        if not checks.origin(request, policy, result):
            logger.debug(
                "cors_origin_rejected",
                origin=request.get_header(constants.ORIGIN),
                errors=result.error_messages,
            )
            return result

        result.supports_credentials = policy.supports_credentials

        if is_preflight(request):
            if not checks.method(request, policy, result):
                logger.debug(
                    "cors_method_rejected",
                    method=request.get_header(constants.ACCESS_CONTROL_REQUEST_METHOD),
                    errors=result.error_messages,
                )
                return result

            if not checks.headers(request, policy, result):
                logger.debug(
                    "cors_headers_rejected",
                    headers=request.get_header(constants.ACCESS_CONTROL_REQUEST_HEADERS),
                    errors=result.error_messages,
                )
                return result

            result.preflight_max_age = policy.preflight_max_age
        else:
            result.allowed_exposed_headers.extend(policy.exposed_headers)

        return result

    def evaluate_policy(self, request: CORSRequest, policy_name: str | None = None) -> EvaluationResult:
        """Resolve *policy_name* through the configured store, then evaluate.

        Raises:
            ValueError: If the evaluator was built without a policy store.
            PolicyNotFoundException: If the store has no such policy.
        """
        if self._options is None:
            raise ValueError("PolicyEvaluator has no CORSOptions to resolve policy names from")
        return self.evaluate(request, self._options.get_policy(policy_name))
