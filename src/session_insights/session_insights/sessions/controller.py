from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict

from flask import Flask, current_app, jsonify, request, session

from ..common.validators import parse_enum, parse_page
from ..core.constants import DEFAULT_ERROR_BANNER_SECONDS
from ..core.enums import Bucket, DetailCategory, FilterField
from ..core.exceptions import NotFoundError, RosterUnavailableError, ValidationError
from ..container import Container
from .model import Selection
from .selection_store import FlaskSessionSelectionStore, SelectionMemory

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "id",
    "name",
    "grade",
    "main_center",
    "school",
    "phone",
    "parent_phone",
    "week",
    "attended",
    "attendance_center",
    "hw_done",
    "quiz_degree",
    "comment",
    "message_state",
    "absences",
    "missing_hw",
    "unattended_quizzes",
]


def register(app: Flask, container: Container) -> None:
    service = container.session_info_service

    def _memory() -> SelectionMemory:
        return SelectionMemory(FlaskSessionSelectionStore(session))

    def _failure(message: str, status: int, **extra):
        return jsonify({"success": False, "message": message, **extra}), status

    def _roster_failure(e: RosterUnavailableError):
        dismiss_after = current_app.config.get("ERROR_BANNER_SECONDS", DEFAULT_ERROR_BANNER_SECONDS)
        return _failure(str(e), 503, dismiss_after=dismiss_after)

    def _requested_changes() -> dict[FilterField, str]:
        return {f: request.args[f.value] for f in FilterField if f.value in request.args}

    def _requested_pages() -> dict[Bucket, int]:
        pages: dict[Bucket, int] = {}
        for b in Bucket:
            arg = f"{b.value}_page"
            if arg in request.args:
                pages[b] = parse_page(request.args.get(arg), arg)
        return pages

    @app.route("/session-info", methods=["GET"], endpoint="session_info")
    def session_info():
        try:
            state, changed = service.open_state(_memory(), changes=_requested_changes())
            # Page numbers sent together with a filter change belong to the old filters.
            pages = {} if changed else _requested_pages()
            view = service.build_view(state, pages=pages)
            return jsonify({"success": True, **view.as_dict()}), 200
        except ValidationError as e:
            return _failure(str(e), 400)
        except RosterUnavailableError as e:
            return _roster_failure(e)
        except Exception:
            logger.exception("Unexpected error while building session info")
            return _failure("Internal error while loading session info", 500)

    @app.route("/session-info/selection/clear", methods=["POST"], endpoint="session_info_clear")
    def session_info_clear():
        try:
            payload = request.get_json(silent=True) or {}
            field_value = payload.get("field") or request.form.get("field") or request.args.get("field")
            field = parse_enum(FilterField, field_value, "field") if field_value else None
            _memory().clear(field)
            return jsonify({"success": True, "selection": _memory().restore().as_dict()}), 200
        except ValidationError as e:
            return _failure(str(e), 400)

    @app.route("/session-info/roster/refresh", methods=["POST"], endpoint="session_info_refresh")
    def session_info_refresh():
        container.roster_cache.invalidate()
        return jsonify({"success": True}), 200

    @app.route("/session-info/<bucket_name>.csv", methods=["GET"], endpoint="session_info_csv")
    def session_info_csv(bucket_name: str):
        try:
            bucket = parse_enum(Bucket, bucket_name, "bucket")
            remembered = _memory().restore().as_dict()
            selection = Selection.of(**{**remembered, **{f.value: v for f, v in _requested_changes().items()}})
            if not selection.all_filters_selected:
                return _failure("Select grade, center and week before exporting", 400)
            rows = service.bucket_rows(selection, bucket)
        except ValidationError as e:
            return _failure(str(e), 400)
        except RosterUnavailableError as e:
            return _roster_failure(e)
        except Exception:
            logger.exception("Unexpected error while exporting %s", bucket_name)
            return _failure("Internal error while exporting session info", 500)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        filename = f"session_info_{bucket.value}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route(
        "/session-info/students/<int:student_id>/details/<category>",
        methods=["GET"],
        endpoint="session_info_details",
    )
    def session_info_details(student_id: int, category: str):
        try:
            details = service.lesson_details(student_id, parse_enum(DetailCategory, category, "category"))
            return jsonify(
                {
                    "success": True,
                    "student_id": details.student_id,
                    "category": details.category.value,
                    "title": details.title,
                    "weeks": [asdict(w) for w in details.weeks],
                }
            ), 200
        except ValidationError as e:
            return _failure(str(e), 400)
        except NotFoundError as e:
            return _failure(str(e), 404)
        except RosterUnavailableError as e:
            return _roster_failure(e)
        except Exception:
            logger.exception("Unexpected error while loading lesson details for %s", student_id)
            return _failure("Internal error while loading lesson details", 500)
