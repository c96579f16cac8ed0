# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class CaseInsensitiveStrEnum(str, Enum):
    """String enum that matches values regardless of case."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class BuildProfile(CaseInsensitiveStrEnum):
    """Build configuration variants measured for every revision.

    Declaration order is the measurement order.
    """

    DEBUG = "debug"
    RELEASE = "release"
