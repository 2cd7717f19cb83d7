# pos_backend/init_db.py
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
