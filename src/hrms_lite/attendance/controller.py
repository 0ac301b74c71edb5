from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_payload, outcome_response, storage_failure
from ..core.exceptions import StorageError


def register(app: Flask, container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        try:
            return jsonify(service.list_attendance())
        except StorageError:
            return storage_failure("Unable to load attendance records.")

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        try:
            outcome = service.record_attendance(json_payload())
        except StorageError:
            return storage_failure("Unable to record attendance.")
        return outcome_response(outcome, success_status=201)

    @app.route("/api/attendance/<employee_id>/<date>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(employee_id: str, date: str):
        try:
            outcome = service.update_attendance(employee_id, date, json_payload())
        except StorageError:
            return storage_failure("Unable to update attendance.")
        return outcome_response(outcome)

    @app.route("/api/attendance/<employee_id>/<date>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(employee_id: str, date: str):
        try:
            outcome = service.delete_attendance(employee_id, date)
        except StorageError:
            return storage_failure("Unable to delete attendance.")
        return outcome_response(outcome)
