# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .docs_controller import DocsController
from .employees_controller import EmployeesController
from .misc_controller import MiscController

__all__ = ["AuthController", "DocsController", "EmployeesController", "MiscController"]
