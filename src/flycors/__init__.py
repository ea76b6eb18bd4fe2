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
"""flycors — CORS policy evaluation for Python web services.

Build a policy, evaluate a request against it, and attach the resulting
headers to your response::

    from flycors import CORSPolicyBuilder, HeaderMapRequest, PolicyEvaluator

    policy = CORSPolicyBuilder("https://app.example.com").add_methods("PUT").build()
    result = PolicyEvaluator().evaluate(
        HeaderMapRequest("OPTIONS", {
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "PUT",
        }),
        policy,
    )
    if result.is_valid:
        response.headers.update(result.to_response_headers())
"""

from flycors.cors import (
    CORSEngine,
    CORSOptions,
    CORSPolicy,
    CORSPolicyBuilder,
    CORSRequest,
    EvaluationResult,
    HeaderMapRequest,
    PolicyEvaluator,
    PolicyValidators,
    is_cors_request,
    is_preflight,
)
from flycors.kernel.exceptions import (
    CORSConfigurationException,
    FlyCORSException,
    PolicyNotFoundException,
)

__version__ = "0.1.0"

__all__ = [
    "CORSConfigurationException",
    "CORSEngine",
    "CORSOptions",
    "CORSPolicy",
    "CORSPolicyBuilder",
    "CORSRequest",
    "EvaluationResult",
    "FlyCORSException",
    "HeaderMapRequest",
    "PolicyEvaluator",
    "PolicyNotFoundException",
    "PolicyValidators",
    "__version__",
    "is_cors_request",
    "is_preflight",
]
