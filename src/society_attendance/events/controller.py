from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.auth import current_officer_id, login_required
from ..core.exceptions import DomainError, NotFoundError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _render_list(*, editing=None, form=None, status: int = 200):
        return (
            render_template(
                "events/list.html",
                events=container.event_service.list_events(),
                editing=editing,
                form=form or {},
                active_page="events",
            ),
            status,
        )

    @app.route("/events", methods=["GET"], endpoint="events")
    @login_required
    def events():
        return _render_list()

    @app.route("/events", methods=["POST"], endpoint="event_create")
    @login_required
    def event_create():
        try:
            container.event_service.create_event(request.form, created_by=current_officer_id())
            flash("Event created successfully", "success")
            return redirect(url_for("events"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to create event")
            flash("Failed to create event", "danger")
        return _render_list(form=request.form, status=400)

    @app.route("/events/<int:event_id>/edit", methods=["GET"], endpoint="event_edit")
    @login_required
    def event_edit(event_id: int):
        try:
            event = container.event_service.get_event(event_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("events"))
        form = {
            "name": event.name,
            "description": event.description or "",
            "event_date": event.event_date.strftime("%Y-%m-%d"),
        }
        return _render_list(editing=event, form=form)

    @app.route("/events/<int:event_id>", methods=["POST"], endpoint="event_update")
    @login_required
    def event_update(event_id: int):
        try:
            container.event_service.update_event(event_id, request.form)
            flash("Event updated successfully", "success")
            return redirect(url_for("events"))
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("events"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to update event %s", event_id)
            flash("Failed to update event", "danger")
        return redirect(url_for("event_edit", event_id=event_id))

    @app.route("/events/<int:event_id>/delete", methods=["POST"], endpoint="event_delete")
    @login_required
    def event_delete(event_id: int):
        try:
            container.event_service.delete_event(event_id)
            flash("Event deleted successfully", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to delete event %s", event_id)
            flash("Failed to delete event", "danger")
        return redirect(url_for("events"))
