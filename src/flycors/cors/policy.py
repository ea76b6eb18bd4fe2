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
"""CORS policy — the immutable rule set for one CORS scope."""

from __future__ import annotations

from dataclasses import dataclass

from flycors.cors import constants
from flycors.kernel.exceptions import CORSConfigurationException


def check_max_age(value: int | None) -> int | None:
    """Return *value* unchanged, or raise if it is a negative number of seconds."""
    if value is not None and value < 0:
        raise CORSConfigurationException(
            constants.PREFLIGHT_MAX_AGE_OUT_OF_RANGE,
            code="CORS_CONFIG_001",
            context={"preflight_max_age": value},
        )
    return value


def _join(values: tuple[str, ...]) -> str:
    return "{" + ",".join(values) + "}"


@dataclass(frozen=True)
class CORSPolicy:
    """Defines what cross-origin access a resource allows.

    Policies are produced by :class:`~flycors.cors.builder.CORSPolicyBuilder`
    and are safe to share between concurrent evaluations: every field is
    read-only and list fields are tuples.

    Attributes:
        origins: Allowed origins. ``("*",)`` means any origin.
        methods: Allowed request methods, compared ordinally.
        headers: Allowed request headers, compared case-insensitively.
        exposed_headers: Response headers client script may read.
        allow_any_method: Accept every requested method.
        allow_any_header: Accept every requested header.
        supports_credentials: Whether credentialed requests are allowed.
        preflight_max_age: Seconds a preflight result may be cached, or None.
    """

    origins: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()
    headers: tuple[str, ...] = ()
    exposed_headers: tuple[str, ...] = ()
    allow_any_method: bool = False
    allow_any_header: bool = False
    supports_credentials: bool = False
    preflight_max_age: int | None = None

    def __post_init__(self) -> None:
        check_max_age(self.preflight_max_age)
        for name in ("origins", "methods", "headers", "exposed_headers"):
            value = getattr(self, name)
            # A lone string is one entry, not a sequence of characters.
            object.__setattr__(self, name, (value,) if isinstance(value, str) else tuple(value))

    @property
    def allow_any_origin(self) -> bool:
        return self.origins == (constants.ANY_ORIGIN,)

    def __str__(self) -> str:
        max_age = "null" if self.preflight_max_age is None else str(self.preflight_max_age)
        return (
            f"AllowAnyHeader: {self.allow_any_header}, "
            f"AllowAnyMethod: {self.allow_any_method}, "
            f"AllowAnyOrigin: {self.allow_any_origin}, "
            f"PreflightMaxAge: {max_age}, "
            f"SupportsCredentials: {self.supports_credentials}, "
            f"Origins: {_join(self.origins)}, "
            f"Methods: {_join(self.methods)}, "
            f"Headers: {_join(self.headers)}, "
            f"ExposedHeaders: {_join(self.exposed_headers)}"
        )
