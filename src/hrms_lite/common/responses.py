from __future__ import annotations

import logging
from typing import Any, Mapping

from flask import jsonify, request

from ..core.enums import OutcomeKind
from ..core.outcome import Outcome

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    OutcomeKind.OK: 200,
    OutcomeKind.VALIDATION_ERROR: 400,
    OutcomeKind.NOT_FOUND: 404,
    OutcomeKind.CONFLICT: 409,
}


def json_payload() -> Mapping[str, Any]:
    """Parsed JSON body, or an empty mapping when the body is not a JSON object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def outcome_response(outcome: Outcome, *, success_status: int = 200):
    if outcome.ok:
        return jsonify({"message": outcome.message}), success_status

    body: dict = {"message": outcome.message}
    if outcome.field:
        body["field"] = outcome.field
    return jsonify(body), STATUS_BY_KIND[outcome.kind]


def storage_failure(message: str):
    """500 with a generic message; driver details stay in the log."""
    logger.exception("%s %s failed: %s", request.method, request.path, message)
    return jsonify({"message": message}), 500
