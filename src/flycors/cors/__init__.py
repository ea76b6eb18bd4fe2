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
"""CORS policy evaluation — policies, the evaluator and its result."""

from flycors.cors.builder import CORSPolicyBuilder
from flycors.cors.evaluator import PolicyEvaluator
from flycors.cors.options import DEFAULT_POLICY_NAME, CORSOptions
from flycors.cors.policy import CORSPolicy
from flycors.cors.ports import CORSEngine
from flycors.cors.request import CORSRequest, HeaderMapRequest, is_cors_request, is_preflight
from flycors.cors.result import EvaluationResult
from flycors.cors.validators import (
    PolicyValidators,
    Validator,
    validate_headers,
    validate_method,
    validate_origin,
)

__all__ = [
    # Policy
    "CORSPolicy",
    "CORSPolicyBuilder",
    "CORSOptions",
    "DEFAULT_POLICY_NAME",
    # Request
    "CORSRequest",
    "HeaderMapRequest",
    "is_cors_request",
    "is_preflight",
    # Evaluation
    "CORSEngine",
    "EvaluationResult",
    "PolicyEvaluator",
    "PolicyValidators",
    "Validator",
    "validate_origin",
    "validate_method",
    "validate_headers",
]
