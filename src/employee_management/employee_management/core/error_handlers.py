from __future__ import annotations

import logging

from flask import Flask, render_template
from werkzeug.exceptions import BadRequest, HTTPException, InternalServerError, NotFound

logger = logging.getLogger(__name__)


def register(app: Flask) -> None:
    @app.errorhandler(BadRequest)
    def bad_request(e: HTTPException):
        return render_template("400.html", error=e), 400

    @app.errorhandler(NotFound)
    def not_found(e: HTTPException):
        return render_template("404.html", error=e), 404

    @app.errorhandler(InternalServerError)
    def server_error(e: InternalServerError):
        # Flask has already logged the traceback of the original exception.
        original = getattr(e, "original_exception", None)
        logger.error("Request failed: %r", original or e)
        return render_template("500.html", error=e), 500
