# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginUserUseCase, StaticCredentialVerifier

__all__ = ["LoginUserUseCase", "StaticCredentialVerifier"]
