"""Flask REST API exposing the finance ledger services."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger.config import LedgerConfig
from ledger.exceptions import RecordNotFoundError, ValidationError
from ledger.services import LedgerService


def create_app(
    config: Optional[LedgerConfig] = None, service: Optional[LedgerService] = None
) -> Flask:
    app = Flask(__name__)

    config = config or LedgerConfig.from_env()
    if config.is_development:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    elif config.allowed_origins:
        CORS(app, resources={r"/*": {"origins": config.allowed_origins}}, supports_credentials=True)
    else:
        CORS(app)

    ledger = service or LedgerService.from_config(config)
    app.extensions["ledger"] = ledger

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/transactions")
    def list_transactions():
        transactions = ledger.list_transactions()
        return _success({"items": [transaction.to_dict() for transaction in transactions]})

    @app.post("/transactions")
    def create_transaction():
        payload = _json_body()
        transaction = ledger.create_transaction(payload)
        return _success(transaction.to_dict(), 201)

    @app.get("/transactions/<transaction_id>")
    def get_transaction(transaction_id: str):
        transaction = ledger.get_transaction(transaction_id)
        return _success(transaction.to_dict())

    @app.put("/transactions/<transaction_id>")
    def update_transaction(transaction_id: str):
        payload = _json_body()
        transaction = ledger.update_transaction(transaction_id, payload)
        if transaction is None:
            return _success({}, 204)
        return _success(transaction.to_dict())

    @app.delete("/transactions/<transaction_id>")
    def delete_transaction(transaction_id: str):
        ledger.delete_transaction(transaction_id)
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        return _success(ledger.get_aggregates().to_dict())

    @app.get("/goal")
    def goal_progress():
        return _success(ledger.get_goal_progress().to_dict())

    @app.put("/goal")
    def set_goal():
        payload = _json_body()
        ledger.set_savings_goal(payload.get("savings_goal"))
        return _success(ledger.get_goal_progress().to_dict())

    @app.post("/adjustments")
    def reconcile_total():
        payload = _json_body()
        adjustment = ledger.reconcile_manual_total(payload.get("kind"), payload.get("new_total"))
        if adjustment is None:
            return _success({"item": None})
        return _success({"item": adjustment.to_dict()}, 201)

    return app
