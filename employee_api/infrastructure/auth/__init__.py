# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import AuthGate, bearer_token, current_subject
from .tokens import JwtTokenService

__all__ = ["AuthGate", "JwtTokenService", "bearer_token", "current_subject"]
