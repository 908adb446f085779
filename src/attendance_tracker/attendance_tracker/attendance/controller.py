from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def attendance_list():
        try:
            records = container.attendance_service.list_all()
        except Exception:
            logger.exception("Error fetching attendance")
            return _error("Failed to fetch attendance records", 500)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        payload = request.get_json(silent=True) or {}
        try:
            record_id = container.attendance_service.record(payload)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Error creating attendance")
            return _error("Failed to create attendance record", 500)
        return jsonify({"message": "Attendance recorded successfully", "id": record_id}), 201

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="attendance_delete")
    def attendance_delete(record_id: int):
        try:
            container.attendance_service.delete(record_id)
        except NotFoundError as e:
            return _error(str(e), 404)
        except Exception:
            logger.exception("Error deleting attendance id=%s", record_id)
            return _error("Failed to delete attendance record", 500)
        return jsonify({"message": "Attendance record deleted successfully"})

    @app.route("/api/attendance/employee/<employee_id>", methods=["GET"], endpoint="attendance_by_employee")
    def attendance_by_employee(employee_id: str):
        try:
            records = container.attendance_service.list_for_employee(employee_id)
        except Exception:
            logger.exception("Error fetching employee attendance employeeID=%s", employee_id)
            return _error("Failed to fetch employee attendance", 500)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/date/<work_date>", methods=["GET"], endpoint="attendance_by_date")
    def attendance_by_date(work_date: str):
        try:
            records = container.attendance_service.list_for_date(work_date)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Error fetching date attendance date=%s", work_date)
            return _error("Failed to fetch attendance for date", 500)
        return jsonify([r.to_dict() for r in records])
