from __future__ import annotations

from datetime import date

from flask import Flask, flash, jsonify, redirect, render_template, request, send_file, url_for

from ..common.auth import login_required
from ..core.exceptions import NotFoundError
from ..container import Container
from .export import render_event_report_csv, render_event_report_xlsx
from .pdf import render_event_report_pdf


def register(app: Flask, container: Container) -> None:
    def _export_name(report, ext: str) -> str:
        return f"attendance_{report.event.event_date.strftime('%Y%m%d')}_{report.event.event_id}.{ext}"

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            stats = container.report_service.dashboard_stats(today=date.today())
        except Exception:
            app.logger.exception("Error fetching stats")
            stats = None
        return render_template("dashboard.html", stats=stats, active_page="dashboard")

    @app.route("/reports", endpoint="reports")
    @login_required
    def reports():
        events = container.event_service.list_events()
        event_id = request.args.get("event_id", type=int)
        if event_id is None and events:
            event_id = events[0].event_id

        report = None
        if event_id is not None:
            try:
                report = container.report_service.build_event_report(event_id)
            except NotFoundError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("Failed to load attendance data for event %s", event_id)
                flash("Failed to load attendance data", "danger")

        return render_template(
            "reports/index.html",
            events=events,
            selected_event_id=event_id,
            report=report,
            active_page="reports",
        )

    @app.route("/reports/<int:event_id>/chart.json", endpoint="report_chart")
    @login_required
    def report_chart(event_id: int):
        try:
            report = container.report_service.build_event_report(event_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, **report.chart_data()})

    def _export_failed(event_id: int):
        app.logger.exception("Failed to export report for event %s", event_id)
        flash("Failed to export report", "danger")
        return redirect(url_for("reports", event_id=event_id))

    @app.route("/reports/<int:event_id>.pdf", endpoint="report_pdf")
    @login_required
    def report_pdf(event_id: int):
        try:
            report = container.report_service.build_event_report(event_id)
            pdf = render_event_report_pdf(report)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports"))
        except Exception:
            return _export_failed(event_id)
        return send_file(
            pdf,
            mimetype="application/pdf",
            as_attachment=True,
            download_name=_export_name(report, "pdf"),
        )

    @app.route("/reports/<int:event_id>.csv", endpoint="report_csv")
    @login_required
    def report_csv(event_id: int):
        try:
            report = container.report_service.build_event_report(event_id)
            body = render_event_report_csv(report)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports"))
        except Exception:
            return _export_failed(event_id)

        return app.response_class(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={_export_name(report, 'csv')}"},
        )

    @app.route("/reports/<int:event_id>.xlsx", endpoint="report_xlsx")
    @login_required
    def report_xlsx(event_id: int):
        try:
            report = container.report_service.build_event_report(event_id)
            workbook = render_event_report_xlsx(report)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("reports"))
        except Exception:
            return _export_failed(event_id)
        return send_file(
            workbook,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=_export_name(report, "xlsx"),
        )
