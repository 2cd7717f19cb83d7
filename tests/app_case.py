import os
import sys
import shutil
import tempfile
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pos_backend.app_factory import create_app
from pos_backend.config import TestConfig
from pos_backend.init_db import db


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class AppTestCase(unittest.TestCase):
    """Fresh app, in-memory database and upload folder per test."""

    def setUp(self):
        self.upload_dir = tempfile.mkdtemp()
        config = type('IsolatedConfig', (TestConfig,), {'UPLOAD_FOLDER': self.upload_dir})
        self.clock = FakeClock()
        self.app = create_app(config, login_clock=self.clock)
        self.client = self.app.test_client()

    def tearDown(self):
        with self.app.app_context():
            db.session.remove()
            db.drop_all()
            db.engine.dispose()
        shutil.rmtree(self.upload_dir, ignore_errors=True)

    def register_user(self, **overrides):
        payload = {
            'name': 'Asha Raman',
            'email': 'asha@example.com',
            'password': 'secret123',
            'dateOfBirth': '1994-08-21',
            'phoneNumber': '9876543210',
        }
        payload.update(overrides)
        return self.client.post('/register', json=payload)

    def login(self, email='asha@example.com', password='secret123', address='127.0.0.1'):
        return self.client.post(
            '/login',
            json={'email': email, 'password': password},
            environ_base={'REMOTE_ADDR': address},
        )
