from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_payload, outcome_response, storage_failure
from ..core.exceptions import StorageError


def register(app: Flask, container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            return jsonify(service.list_employees())
        except StorageError:
            return storage_failure("Unable to load employees.")

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            outcome = service.add_employee(json_payload())
        except StorageError:
            return storage_failure("Unable to add employee.")
        return outcome_response(outcome, success_status=201)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        try:
            outcome = service.update_employee(employee_id, json_payload())
        except StorageError:
            return storage_failure("Unable to update employee.")
        return outcome_response(outcome)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    def remove_employee(employee_id: str):
        try:
            outcome = service.remove_employee(employee_id)
        except StorageError:
            return storage_failure("Unable to delete employee.")
        return outcome_response(outcome)
