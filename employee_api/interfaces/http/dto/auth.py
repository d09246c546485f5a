# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Missing fields fall through to the credential check and fail with 401.
    username: str = ""
    password: str = ""


class LoginResponseDTO(BaseModel):
    token: str
