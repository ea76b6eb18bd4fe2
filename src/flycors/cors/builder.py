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
"""Fluent builder that accumulates policy fragments into a CORSPolicy."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import timedelta

from flycors.cors import constants
from flycors.cors.policy import CORSPolicy, check_max_age


def _append_unique(target: list[str], values: Iterable[str], key: Callable[[str], str] = str) -> None:
    """Append *values* to *target*, skipping any whose key is already present."""
    seen = {key(v) for v in target}
    for value in values:
        k = key(value)
        if k not in seen:
            seen.add(k)
            target.append(value)


class CORSPolicyBuilder:
    """Exposes methods to build a :class:`CORSPolicy`.

    Every ``add_*`` call and :meth:`combine` append without duplicates,
    keeping the first occurrence. Origins and methods compare ordinally;
    header names compare case-insensitively.

    Usage::

        policy = (
            CORSPolicyBuilder("https://app.example.com")
            .add_methods("GET", "PUT")
            .add_headers("X-Request-Id")
            .allow_credentials()
            .set_preflight_max_age(600)
            .build()
        )
    """

    def __init__(self, *origins: str) -> None:
        self._origins: list[str] = []
        self._methods: list[str] = []
        self._headers: list[str] = []
        self._exposed_headers: list[str] = []
        self._allow_any_method = False
        self._allow_any_header = False
        self._supports_credentials = False
        self._preflight_max_age: int | None = None
        self.add_origins(*origins)

    @classmethod
    def from_policy(cls, policy: CORSPolicy) -> CORSPolicyBuilder:
        """Start a builder pre-populated with everything *policy* allows."""
        return cls().combine(policy)

    def add_origins(self, *origins: str) -> CORSPolicyBuilder:
        _append_unique(self._origins, origins)
        return self

    def add_headers(self, *headers: str) -> CORSPolicyBuilder:
        _append_unique(self._headers, headers, key=str.lower)
        return self

    def add_exposed_headers(self, *headers: str) -> CORSPolicyBuilder:
        _append_unique(self._exposed_headers, headers, key=str.lower)
        return self

    def add_methods(self, *methods: str) -> CORSPolicyBuilder:
        _append_unique(self._methods, methods)
        return self

    def allow_credentials(self) -> CORSPolicyBuilder:
        self._supports_credentials = True
        return self

    def allow_any_origin(self) -> CORSPolicyBuilder:
        """Replace the configured origins with the wildcard."""
        self._origins = [constants.ANY_ORIGIN]
        return self

    def allow_any_method(self) -> CORSPolicyBuilder:
        self._allow_any_method = True
        return self

    def allow_any_header(self) -> CORSPolicyBuilder:
        self._allow_any_header = True
        return self

    def set_preflight_max_age(self, max_age: int | timedelta | None) -> CORSPolicyBuilder:
        """Set how long a preflight result may be cached.

        Raises:
            CORSConfigurationException: If *max_age* is negative.
        """
        if isinstance(max_age, timedelta):
            if max_age < timedelta(0):
                check_max_age(int(max_age // timedelta(seconds=1)))
            max_age = int(max_age.total_seconds())
        self._preflight_max_age = check_max_age(max_age)
        return self

    def combine(self, policy: CORSPolicy) -> CORSPolicyBuilder:
        """Merge another policy into this builder.

        Lists are appended (deduplicated), the ``allow_any_*`` and
        credentials flags are OR-ed, and the other policy's max-age wins
        when it has one.
        """
        self.add_origins(*policy.origins)
        self.add_headers(*policy.headers)
        self.add_exposed_headers(*policy.exposed_headers)
        self.add_methods(*policy.methods)
        self._allow_any_method = self._allow_any_method or policy.allow_any_method
        self._allow_any_header = self._allow_any_header or policy.allow_any_header
        self._supports_credentials = self._supports_credentials or policy.supports_credentials
        if policy.preflight_max_age is not None:
            self._preflight_max_age = policy.preflight_max_age
        return self

    def build(self) -> CORSPolicy:
        """Snapshot the accumulated state into an immutable policy."""
        return CORSPolicy(
            origins=tuple(self._origins),
            methods=tuple(self._methods),
            headers=tuple(self._headers),
            exposed_headers=tuple(self._exposed_headers),
            allow_any_method=self._allow_any_method,
            allow_any_header=self._allow_any_header,
            supports_credentials=self._supports_credentials,
            preflight_max_age=self._preflight_max_age,
        )
