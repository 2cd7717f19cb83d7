# pos_backend/app_factory.py
from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
from sqlalchemy.exc import OperationalError
from werkzeug.exceptions import HTTPException
from pos_backend.init_db import db
from pos_backend.logging_config import setup_logging
from pos_backend.rate_limit import SlidingWindowLimiter

logger = setup_logging()

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'X-XSS-Protection': '0',
    'Referrer-Policy': 'no-referrer',
    'Cross-Origin-Resource-Policy': 'same-origin',
}

def create_app(config_class='pos_backend.config.Config', login_clock=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)

    CORS(app, origins=app.config['CORS_ORIGINS'])

    limiter_options = {'clock': login_clock} if login_clock is not None else {}
    app.extensions['login_limiter'] = SlidingWindowLimiter(
        app.config['LOGIN_RATE_LIMIT'], app.config['LOGIN_RATE_WINDOW'], **limiter_options
    )

    @app.after_request
    def set_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.route('/uploads/<path:filename>')
    def uploaded_file(filename):
        return send_from_directory(app.config['UPLOAD_FOLDER'], filename)

    # Import and register blueprints
    from pos_backend.authentication.routes import auth_bp as auth_blueprint
    app.register_blueprint(auth_blueprint)

    from pos_backend.orders.routes import orders_bp as orders_blueprint
    app.register_blueprint(orders_blueprint)

    app.register_error_handler(Exception, handle_error)

    with app.app_context():
        try:
            db.create_all()
        except OperationalError as e:
            app.logger.error(f"OperationalError during database initialization: {e}")

    return app

def handle_error(error):
    """Last-resort handler: JSON envelope, never a stack trace."""
    if isinstance(error, HTTPException):
        return jsonify({'error': {'message': error.description}}), error.code

    logger.exception(f"Unhandled error: {error}")
    db.session.rollback()
    return jsonify({'error': {'message': 'Internal Server Error'}}), 500

def main():
    app = create_app()
    logger.info(f"Server running on port {app.config['PORT']}")
    app.run(host='0.0.0.0', port=app.config['PORT'])

if __name__ == '__main__':
    main()
