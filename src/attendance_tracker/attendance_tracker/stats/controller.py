from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats/dashboard", methods=["GET"], endpoint="stats_dashboard")
    def stats_dashboard():
        # Sub-query failures are absorbed by the service; nothing to catch here.
        stats = container.stats_service.dashboard()
        return jsonify(stats.to_dict())

    @app.route("/api/stats/monthly-trends", methods=["GET"], endpoint="stats_monthly_trends")
    def stats_monthly_trends():
        try:
            trends = container.stats_service.monthly_trends()
        except Exception:
            logger.exception("Error fetching monthly trends")
            return jsonify({"error": "Failed to fetch trends"}), 500
        return jsonify([t.to_dict() for t in trends])
