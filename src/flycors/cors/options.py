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
"""CORSOptions — named policy registry."""

from __future__ import annotations

from collections.abc import Callable

from flycors.config.properties.cors import CORSProperties
from flycors.cors.builder import CORSPolicyBuilder
from flycors.cors.policy import CORSPolicy
from flycors.kernel.exceptions import PolicyNotFoundException

PolicySource = CORSPolicy | Callable[[CORSPolicyBuilder], object]

DEFAULT_POLICY_NAME = "__DefaultCorsPolicy"


class CORSOptions:
    """Maps policy names to built :class:`CORSPolicy` instances.

    Policies can be registered ready-made or through a configure callable
    that receives a fresh :class:`CORSPolicyBuilder`::

        options = CORSOptions()
        options.add_policy("api", lambda b: b.add_origins("https://a.com").allow_any_method())
    """

    def __init__(self, default_policy_name: str = DEFAULT_POLICY_NAME) -> None:
        self.default_policy_name = default_policy_name
        self._policies: dict[str, CORSPolicy] = {}

    @classmethod
    def from_properties(cls, properties: CORSProperties) -> CORSOptions:
        return cls(default_policy_name=properties.default_policy_name)

    @property
    def policy_names(self) -> list[str]:
        return list(self._policies)

    def add_policy(self, name: str, policy: PolicySource) -> None:
        """Register *policy* under *name*, replacing any previous entry."""
        if not isinstance(policy, CORSPolicy):
            builder = CORSPolicyBuilder()
            policy(builder)
            policy = builder.build()
        self._policies[name] = policy

    def add_default_policy(self, policy: PolicySource) -> None:
        self.add_policy(self.default_policy_name, policy)

    def get_policy(self, name: str | None = None) -> CORSPolicy:
        """Look up a policy; ``None`` selects the default policy.

        Raises:
            PolicyNotFoundException: If nothing is registered under the name.
        """
        key = self.default_policy_name if name is None else name
        try:
            return self._policies[key]
        except KeyError:
            raise PolicyNotFoundException(
                f"No CORS policy registered under '{key}'",
                code="CORS_POLICY_404",
                context={"policy_name": key, "available": self.policy_names},
            ) from None
