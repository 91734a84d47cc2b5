from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container
from ..punches.normalizer import normalize_device_punches
from ..worklogs.normalizer import normalize_time_logs
from .serializers import diagnostic_to_dict, reconciliation_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_day_payload(data) -> dict:
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        person_id = str(data.get("personId") or "").strip()
        if not person_id:
            raise ValidationError("personId is required")

        try:
            work_date = parse_iso_date(str(data.get("date") or ""))
        except ValueError as e:
            raise ValidationError("date must be YYYY-MM-DD") from e

        punches = data.get("punches") or []
        logs = data.get("logs") or []
        if not isinstance(punches, list) or not isinstance(logs, list):
            raise ValidationError("punches and logs must be lists")

        return {
            "person_id": person_id,
            "work_date": work_date,
            "punches": punches,
            "logs": logs,
            "marked_absent": bool(data.get("markedAbsent", False)),
        }

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"success": True}), 200

    @app.route("/api/reconcile/day", methods=["POST"], endpoint="api_reconcile_day")
    def api_reconcile_day():
        try:
            payload = _parse_day_payload(request.get_json(silent=True))

            normalized = normalize_device_punches(payload["punches"])
            events = [e for e in normalized.events if e.work_date == payload["work_date"]]
            codes = {e.employee_code for e in events}
            if len(codes) > 1:
                raise ValidationError(
                    f"punches must belong to one employee, got {', '.join(sorted(codes))}"
                )
            logs = normalize_time_logs(payload["logs"], source=payload["person_id"])

            result = container.reconciliation_service.reconcile_day(
                person_id=payload["person_id"],
                work_date=payload["work_date"],
                punches=events,
                logs=logs.entries,
                marked_absent=payload["marked_absent"],
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Reconciliation failed")
            return jsonify({"success": False, "message": "Internal error while reconciling"}), 500

        body = reconciliation_to_dict(result)
        feed_warnings = [diagnostic_to_dict(d) for d in (*normalized.diagnostics, *logs.diagnostics)]
        body["diagnostics"] = feed_warnings + body["diagnostics"]
        body["success"] = True
        return jsonify(body), 200
