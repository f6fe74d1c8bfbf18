from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.exceptions import DomainError
from ..container import Container
from .service import SessionOfficer


def register(app: Flask, container: Container) -> None:
    def _start_session(officer: SessionOfficer) -> None:
        session.clear()
        session["officer_id"] = officer.officer_id
        session["name"] = officer.full_name
        session["email"] = officer.email

    @app.route("/", endpoint="index")
    def index():
        if "officer_id" in session:
            return redirect(url_for("dashboard"))
        return redirect(url_for("auth"))

    @app.route("/auth", methods=["GET"], endpoint="auth")
    def auth():
        if "officer_id" in session:
            return redirect(url_for("dashboard"))
        return render_template("auth.html", tab=request.args.get("tab", "signin"))

    @app.route("/auth/signin", methods=["POST"], endpoint="sign_in")
    def sign_in():
        try:
            officer = container.auth_service.sign_in(
                request.form.get("email", ""),
                request.form.get("password", ""),
            )
            _start_session(officer)
            flash("Signed in successfully", "success")
            return redirect(url_for("dashboard"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Sign-in failed")
            flash("Failed to sign in. Please try again.", "danger")
        return render_template("auth.html", tab="signin", email=request.form.get("email", "")), 400

    @app.route("/auth/signup", methods=["POST"], endpoint="sign_up")
    def sign_up():
        try:
            officer = container.auth_service.sign_up(
                request.form.get("full_name", ""),
                request.form.get("email", ""),
                request.form.get("password", ""),
            )
            _start_session(officer)
            flash("Account created successfully! Signing you in...", "success")
            return redirect(url_for("dashboard"))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Sign-up failed")
            flash("Failed to create account. Please try again.", "danger")
        return (
            render_template(
                "auth.html",
                tab="signup",
                email=request.form.get("email", ""),
                full_name=request.form.get("full_name", ""),
            ),
            400,
        )

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("auth"))
