# pos_backend/config.py
import os
import binascii

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or binascii.hexlify(os.urandom(24)).decode()

    BASE_DIR = os.path.abspath(os.path.dirname(__file__))

    DATABASE_PATH = os.path.join(BASE_DIR, 'pos_data.db')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', f'sqlite:///{DATABASE_PATH}')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(os.getcwd(), 'uploads'))

    PORT = int(os.environ.get('PORT', 1503))

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Shared by /login and /admin/login, keyed by client address
    LOGIN_RATE_LIMIT = 5
    LOGIN_RATE_WINDOW = 15 * 60

    BCRYPT_ROUNDS = 10

class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    BCRYPT_ROUNDS = 4
