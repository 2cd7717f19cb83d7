# pos_backend/authentication/models.py
from pos_backend.init_db import db

class User(db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(100), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    phone_number = db.Column(db.String(32), nullable=False)
    profile_image = db.Column(db.String(255), nullable=True)

    def to_dict(self):
        """Public representation; the password digest is never included."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'dateOfBirth': self.date_of_birth.isoformat() if self.date_of_birth else None,
            'phoneNumber': self.phone_number,
            'profileImage': self.profile_image,
        }

class Admin(db.Model):
    __tablename__ = 'admin'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    password = db.Column(db.String(100), nullable=False)

    def to_dict(self):
        return {'id': self.id, 'username': self.username}
