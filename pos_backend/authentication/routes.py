# pos_backend/authentication/routes.py
from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from pos_backend.init_db import db
from pos_backend.logging_config import setup_logging
from pos_backend.decorators import login_rate_limited
from pos_backend.authentication.validators import validate, registration_rules, LOGIN_RULES, ADMIN_RULES
from pos_backend.authentication.views import (
    email_available, save_profile_image, remove_profile_image, register_user, authenticate_user,
    register_admin, authenticate_admin, get_user
)


auth_bp = Blueprint('auth', __name__)

# Setup logging
logger = setup_logging()


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _request_data():
    if request.is_json:
        return _json_body()
    return request.form.to_dict()


@auth_bp.route('/register', methods=['POST'])
def register():
    data = _request_data()

    errors = validate(data, registration_rules(email_available))
    if errors:
        logger.warning(f"Registration rejected with {len(errors)} validation error(s).")
        return jsonify({'errors': errors}), 400

    image = request.files.get('profileImage')
    profile_image = None
    try:
        if image and image.filename:
            profile_image = save_profile_image(image)
        user = register_user(data, profile_image)
    except (SQLAlchemyError, OSError, ValueError) as e:
        db.session.rollback()
        remove_profile_image(profile_image)
        logger.error(f"Error during registration: {e}")
        return jsonify({'error': 'Registration failed'}), 500

    logger.info(f"New user {user.email} registered successfully.")
    return jsonify({'message': 'User registered successfully', 'user': user.to_dict()}), 201


@auth_bp.route('/login', methods=['POST'])
@login_rate_limited
def login():
    data = _json_body()

    errors = validate(data, LOGIN_RULES)
    if errors:
        logger.warning("Login attempt with invalid fields.")
        return jsonify({'errors': errors}), 400

    email = data['email']
    try:
        user = authenticate_user(email, data['password'])
    except SQLAlchemyError as e:
        logger.error(f"Error during login: {e}")
        return jsonify({'error': 'Login failed'}), 500

    if not user:
        logger.warning(f"Failed login attempt for email: {email}")
        return jsonify({'error': 'Invalid email or password'}), 400

    logger.info(f"User {email} logged in successfully.")
    return jsonify({
        'message': 'Successfully logged in',
        'user': {'name': user.name, 'email': user.email, 'id': user.id}
    }), 200


@auth_bp.route('/admin/register', methods=['POST'])
def admin_register():
    data = _json_body()

    errors = validate(data, ADMIN_RULES)
    if errors:
        logger.warning("Admin registration attempt with missing fields.")
        return jsonify({'errors': errors}), 400

    try:
        admin = register_admin(data['username'], data['password'])
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Error during admin registration: {e}")
        return jsonify({'error': 'Registration failed'}), 500

    logger.info(f"Admin {admin.username} registered successfully.")
    return jsonify({'message': 'Admin registered successfully', 'admin': admin.to_dict()}), 201


@auth_bp.route('/admin/login', methods=['POST'])
@login_rate_limited
def admin_login():
    data = _json_body()

    errors = validate(data, ADMIN_RULES)
    if errors:
        logger.warning("Admin login attempt with missing fields.")
        return jsonify({'errors': errors}), 400

    username = data['username']
    try:
        admin = authenticate_admin(username, data['password'])
    except SQLAlchemyError as e:
        logger.error(f"Error during admin login: {e}")
        return jsonify({'error': 'Login failed'}), 500

    if not admin:
        logger.warning(f"Failed admin login attempt for username: {username}")
        return jsonify({'error': 'Invalid username or password'}), 400

    logger.info(f"Admin {username} logged in successfully.")
    return jsonify({'message': 'Successfully logged in'}), 200


@auth_bp.route('/user-details/<int:user_id>', methods=['GET'])
def user_details(user_id):
    user = get_user(user_id)
    if not user:
        return jsonify({'success': False, 'error': True, 'message': 'User not found'}), 404

    return jsonify({'success': True, 'error': False, 'user': user.to_dict()}), 200
