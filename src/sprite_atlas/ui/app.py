"""Flask-based JSON browser for atlas descriptors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request

from sprite_atlas.config import Config, load_config
from sprite_atlas.data import Atlas
from sprite_atlas.errors import AtlasError
from sprite_atlas.io import read_atlas
from sprite_atlas.lookup import find_region

logger = logging.getLogger(__name__)

_USAGE = (
    "Atlas descriptor browser\n"
    "GET /atlas?path=PATH              pages and regions as JSON\n"
    "GET /region?path=PATH&name=NAME   first region with NAME as JSON\n"
)


class _BadRequest(Exception):
    pass


def create_app(config: Optional[Config] = None) -> Flask:
    app = Flask(__name__)
    atlas_config = config or load_config(None)

    def _load_atlas() -> Atlas:
        raw_path = request.args.get("path", "").strip()
        if not raw_path:
            raise _BadRequest("Missing 'path' query parameter.")
        return read_atlas(Path(raw_path).expanduser(), atlas_config)

    @app.errorhandler(_BadRequest)
    def bad_request(exc: _BadRequest):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(AtlasError)
    def atlas_error(exc: AtlasError):
        logger.warning("Atlas request failed: %s", exc)
        return jsonify({"error": str(exc)}), 400

    @app.route("/")
    def index():
        return _USAGE, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/atlas")
    def atlas_summary():
        return jsonify(_load_atlas().to_dict())

    @app.route("/region")
    def region():
        name = request.args.get("name", "")
        if not name:
            raise _BadRequest("Missing 'name' query parameter.")
        match = find_region(_load_atlas(), name)
        if match is None:
            return jsonify({"error": f"Region '{name}' not found."}), 404
        return jsonify(match.to_dict())

    return app
