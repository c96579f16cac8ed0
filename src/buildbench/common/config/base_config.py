# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base class for all BuildBench configuration models."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=False,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict of the explicitly set options."""
        return self.model_dump(mode="json", exclude_defaults=True, exclude_none=True)
