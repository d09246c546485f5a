# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EmployeePayloadDTO(BaseModel):
    """Create/update body. Blank checks live in the repository; `id` is ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    position: str | None = None


class EmployeeDTO(BaseModel):
    id: int
    name: str
    position: str
