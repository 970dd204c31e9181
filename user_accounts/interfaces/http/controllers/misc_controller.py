# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from user_accounts.infrastructure.health import check_database

GREETING = "User accounts service is running"


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify({"message": GREETING})

    def health(self):
        report = check_database()
        return jsonify(report.to_dict()), 200 if report.ok else 503
