# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, redirect, url_for

SWAGGER_UI_VERSION = "5"

_SWAGGER_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Employee API</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({{url: "{spec_url}", dom_id: "#swagger-ui"}});
  </script>
</body>
</html>
"""


class DocsController:
    """Serves the OpenAPI document and a Swagger UI page that renders it."""

    def __init__(self, *, spec: dict[str, Any]) -> None:
        self._spec = spec

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("docs", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/openapi.json", view_func=self.openapi_spec, methods=["GET"])
        bp.add_url_rule("/swagger", view_func=self.swagger_ui, methods=["GET"])
        return bp

    def index(self) -> Response:
        return redirect(url_for("docs.swagger_ui"))

    def openapi_spec(self) -> Response:
        return jsonify(self._spec)

    def swagger_ui(self) -> Response:
        html = _SWAGGER_PAGE.format(
            version=SWAGGER_UI_VERSION,
            spec_url=url_for("docs.openapi_spec"),
        )
        return Response(html, mimetype="text/html")
