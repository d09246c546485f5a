# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-memory employee registry served over HTTP with bearer-token auth."""

__version__ = "1.0.0"
