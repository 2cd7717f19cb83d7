# pos_backend/authentication/views.py
import os
import time
import bcrypt
from flask import current_app, has_app_context
from werkzeug.utils import secure_filename
from pos_backend.init_db import db
from pos_backend.authentication.models import User, Admin
from pos_backend.authentication.validators import parse_iso_date
from pos_backend.logging_config import setup_logging

logger = setup_logging()

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password):
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(password, rounds=None):
    if rounds is None:
        rounds = current_app.config.get('BCRYPT_ROUNDS', DEFAULT_BCRYPT_ROUNDS) if has_app_context() else DEFAULT_BCRYPT_ROUNDS
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def check_password(password, digest):
    if not isinstance(password, str) or not digest:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), digest.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt digest
        logger.error("Malformed password digest encountered during verification.")
        return False


def email_available(email):
    return User.query.filter_by(email=email).first() is None


def save_profile_image(file_storage):
    """Store an uploaded image as ``<millis>-<filename>`` and return its relative path."""
    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)

    filename = f"{int(time.time() * 1000)}-{secure_filename(file_storage.filename)}"
    file_storage.save(os.path.join(upload_folder, filename))
    logger.info(f"Stored profile image {filename}")
    return f"uploads/{filename}"


def remove_profile_image(stored_path):
    if not stored_path:
        return
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], os.path.basename(stored_path))
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def register_user(data, profile_image=None):
    """Persist a new user from already validated ``data``.

    The caller owns validation; uniqueness is still enforced by the database,
    so a concurrent registration of the same email surfaces here as an
    ``IntegrityError``.
    """
    user = User(
        name=data['name'].strip(),
        email=data['email'],
        password=hash_password(data['password']),
        date_of_birth=parse_iso_date(data['dateOfBirth']),
        phone_number=data['phoneNumber'],
        profile_image=profile_image,
    )
    db.session.add(user)
    db.session.commit()
    return user


def authenticate_user(email, password):
    user = User.query.filter_by(email=email).first()
    if not user or not check_password(password, user.password):
        return None
    return user


def register_admin(username, password):
    admin = Admin(username=username, password=hash_password(password))
    db.session.add(admin)
    db.session.commit()
    return admin


def authenticate_admin(username, password):
    admin = Admin.query.filter_by(username=username).first()
    if not admin or not check_password(password, admin.password):
        return None
    return admin


def get_user(user_id):
    return db.session.get(User, user_id)
