# pos_backend/decorators.py
import math
from functools import wraps
from flask import current_app, jsonify, request
from pos_backend.logging_config import setup_logging

logger = setup_logging()

LOGIN_LIMIT_MESSAGE = 'Too many login attempts from this IP, please try again later.'


def login_rate_limited(f):
    """Reject the request with 429 once the client address has used up its login attempts."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        limiter = current_app.extensions['login_limiter']
        client = request.remote_addr or 'unknown'
        allowed, retry_after = limiter.hit(client)
        if not allowed:
            logger.warning(f"Login rate limit exceeded for {client}")
            response = jsonify({'error': LOGIN_LIMIT_MESSAGE})
            response.status_code = 429
            response.headers['Retry-After'] = str(int(math.ceil(retry_after)))
            return response
        return f(*args, **kwargs)
    return decorated_function
