from functools import wraps
from flask import Flask, jsonify
from subway_backend import config
from subway_backend.database import RecordNotFound
from subwayModel.errors import InvalidSectionError, SectionError

app = Flask(__name__)
app.config.from_object(config.Config())
app.logger.setLevel(int(app.config["LOG_LEVEL"]))


def error_response(http_code, message, error=None):
    body = {"response": "ERROR", "http_code": http_code, "message": message}
    if error is not None:
        body["error"] = error
    return jsonify(body), http_code


def get_http_exception_handler(app):
    """Overrides the default http exception handler to return JSON."""
    handle_http_exception = app.handle_http_exception

    @wraps(handle_http_exception)
    def ret_val(exception):
        exc = handle_http_exception(exception)
        return error_response(exc.code, exc.description)

    return ret_val


# Override the HTTP exception handler.
app.handle_http_exception = get_http_exception_handler(app)


# Client errors from the line model carry their own code, e.g.
# SPLIT_DISTANCE_TOO_LONG, so callers can tell them apart.
@app.errorhandler(InvalidSectionError)
@app.errorhandler(SectionError)
def line_error(exception):
    app.logger.info("Rejected line change: %s (%s)", exception, exception.code)
    return error_response(400, str(exception), exception.code)


@app.errorhandler(RecordNotFound)
def not_found(exception):
    app.logger.info("Not found: %s", exception)
    return error_response(404, str(exception), "NOT_FOUND")


@app.errorhandler(500)
def internal_error(exception):
    app.logger.error("Unhandled error: %s", exception)
    return error_response(500, str(exception))
