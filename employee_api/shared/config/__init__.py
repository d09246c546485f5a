# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import DEFAULT_JWT_SECRET, AppConfig, SecurityConfig, load_config

__all__ = ["AppConfig", "DEFAULT_JWT_SECRET", "SecurityConfig", "load_config"]
