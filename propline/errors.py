from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException, InternalServerError
from .extensions import db
from .services.projection_service import ProjectionError


def error_response(status_code, error, message):
    response = jsonify({'error': error, 'message': message})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return error_response(e.code, e.name, e.description)

    @app.errorhandler(ProjectionError)
    def handle_projection_error(e):
        return error_response(422, 'Unprocessable Entity', str(e))

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        db.session.rollback()
        current_app.logger.exception(f"Unhandled error: {e}")
        internal = InternalServerError()
        return error_response(500, internal.name, internal.description)
