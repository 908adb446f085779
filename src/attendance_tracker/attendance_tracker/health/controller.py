from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_utc_iso
from ..container import Container

API_NAME = "Employee Attendance API"

ENDPOINTS = {
    "health": "GET /api/health",
    "getAll": "GET /api/attendance",
    "post": "POST /api/attendance",
    "delete": "DELETE /api/attendance/:id",
    "byEmployee": "GET /api/attendance/employee/:employeeID",
    "byDate": "GET /api/attendance/date/:date",
    "stats": "GET /api/stats/dashboard",
    "monthlyTrends": "GET /api/stats/monthly-trends",
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        connected = container.conn.ping()
        return jsonify(
            {
                "status": "OK",
                "message": f"{API_NAME} is running",
                "database": "Connected" if connected else "Disconnected",
                "timestamp": now_utc_iso(),
            }
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify(
            {
                "message": "Employee Attendance Tracker API is running!",
                "note": "The web client is served separately and talks to this API over HTTP.",
                "endpoints": ENDPOINTS,
            }
        )
