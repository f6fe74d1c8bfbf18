from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, request, session, url_for


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "officer_id" not in session:
            if request.path.startswith("/api/"):
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401
            flash("Please sign in to continue", "warning")
            return redirect(url_for("auth"))
        return view(*args, **kwargs)

    return wrapper


def current_officer_id() -> int:
    return int(session["officer_id"])
