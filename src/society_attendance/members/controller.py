from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..common.auth import login_required
from ..core.constants import BLOCK_CHOICES, YEAR_LEVEL_CHOICES
from ..core.enums import Program
from ..core.exceptions import DomainError, NotFoundError
from ..container import Container
from .model import MemberFilters
from .qr import member_card_png
from .roster import parse_roster, parse_roster_text


def register(app: Flask, container: Container) -> None:
    def _render_form(*, member=None, form=None, status: int = 200):
        return (
            render_template(
                "members/form.html",
                member=member,
                form=form or {},
                programs=Program.values(),
                blocks=BLOCK_CHOICES,
                year_levels=YEAR_LEVEL_CHOICES,
                active_page="members",
            ),
            status,
        )

    @app.route("/members", methods=["GET"], endpoint="members")
    @login_required
    def members():
        filters = MemberFilters.from_args(request.args)
        page = request.args.get("page", "1")
        listing = container.member_service.list_members(filters, page=int(page) if page.isdigit() else 1)
        return render_template(
            "members/list.html",
            listing=listing,
            filters=filters,
            programs=Program.values(),
            blocks=BLOCK_CHOICES,
            year_levels=YEAR_LEVEL_CHOICES,
            active_page="members",
        )

    @app.route("/members/new", methods=["GET"], endpoint="member_new")
    @login_required
    def member_new():
        return _render_form()

    @app.route("/members", methods=["POST"], endpoint="member_create")
    @login_required
    def member_create():
        try:
            container.member_service.create_member(request.form)
            flash("Member added successfully", "success")
            return redirect(url_for("members"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to add member")
            flash("Failed to add member. Please try again.", "danger")
        return _render_form(form=request.form, status=400)

    @app.route("/members/<int:member_id>/edit", methods=["GET"], endpoint="member_edit")
    @login_required
    def member_edit(member_id: int):
        try:
            member = container.member_service.get_member(member_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("members"))
        form = {
            "school_id": member.school_id,
            "name": member.name,
            "program": member.program.value,
            "block": member.block,
            "year_level": str(member.year_level or ""),
        }
        return _render_form(member=member, form=form)

    @app.route("/members/<int:member_id>", methods=["POST"], endpoint="member_update")
    @login_required
    def member_update(member_id: int):
        try:
            container.member_service.update_member(member_id, request.form)
            flash("Member updated successfully", "success")
            return redirect(url_for("members"))
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("members"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to update member %s", member_id)
            flash("Failed to update member. Please try again.", "danger")
        return _render_form(member={"member_id": member_id}, form=request.form, status=400)

    @app.route("/members/<int:member_id>/delete", methods=["POST"], endpoint="member_delete")
    @login_required
    def member_delete(member_id: int):
        try:
            container.member_service.delete_member(member_id)
            flash("Member deleted successfully", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to delete member %s", member_id)
            flash("Failed to delete member. Please try again.", "danger")
        return redirect(url_for("members"))

    @app.route("/members/recalculate-year-levels", methods=["POST"], endpoint="members_recalculate")
    @login_required
    def members_recalculate():
        try:
            result = container.member_service.recalculate_year_levels()
            msg = "Year levels recalculated successfully"
            if result.skipped:
                msg += f" ({result.skipped} member(s) with unrecognised school IDs skipped)"
            flash(msg, "success")
        except Exception as e:
            app.logger.exception("Failed to recalculate year levels")
            flash(f"Failed to recalculate year levels: {e}", "danger")
        return redirect(url_for("members"))

    @app.route("/members/upload", methods=["GET", "POST"], endpoint="members_upload")
    @login_required
    def members_upload():
        status = None
        if request.method == "POST":
            try:
                file = request.files.get("roster")
                if file and file.filename:
                    rows = parse_roster(file.stream, file.filename)
                else:
                    rows = parse_roster_text(request.form.get("roster_text", ""))
                result = container.member_service.import_roster(rows)
                status = result.message
                flash(status, "warning" if result.skipped_duplicates else "success")
            except DomainError as e:
                status = f"Upload failed: {e}"
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Roster upload failed")
                status = f"Error: {e}"
                flash("An error occurred during upload", "danger")
        return render_template("members/upload.html", upload_status=status, active_page="members")

    @app.route("/members/<int:member_id>/card.png", methods=["GET"], endpoint="member_card")
    @login_required
    def member_card(member_id: int):
        try:
            member = container.member_service.get_member(member_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("members"))
        return send_file(
            member_card_png(member.school_id),
            mimetype="image/png",
            download_name=f"{member.school_id}.png",
        )
