from .extensions import db
from flask_login import UserMixin
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash

class User(UserMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(200), nullable=False)
    name = db.Column(db.String(100), nullable=True)
    email = db.Column(db.String(100), unique=True, nullable=True)
    role = db.Column(db.String(20), default='viewer') # 'admin' or 'viewer'
    is_default_password = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'is_default_password': self.is_default_password,
        }

class Player(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    external_id = db.Column(db.String(50), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    team = db.Column(db.String(10), nullable=True)
    position = db.Column(db.String(10), nullable=True)

    # Recent-form features (per game)
    mean = db.Column(db.Float, nullable=False, default=0.0)
    stddev = db.Column(db.Float, nullable=False, default=0.0)
    weighted_mean = db.Column(db.Float, nullable=False, default=0.0)
    trend = db.Column(db.Float, nullable=False, default=0.0)

    FEATURES = ('mean', 'stddev', 'weighted_mean', 'trend')

    def features(self):
        return {name: getattr(self, name) for name in self.FEATURES}

    def to_dict(self):
        data = {
            'id': self.id,
            'external_id': self.external_id,
            'name': self.name,
            'team': self.team,
            'position': self.position,
        }
        data.update(self.features())
        return data

class ModelParameters(db.Model):
    """Stored coefficients of a linear projection model."""
    __tablename__ = 'model_parameters'
    __table_args__ = (db.UniqueConstraint('name', 'version', name='uq_model_parameters_name_version'),)

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    version = db.Column(db.Integer, nullable=False, default=1)
    target = db.Column(db.String(50), nullable=False) # e.g. 'receiving_yards'
    intercept = db.Column(db.Float, nullable=False, default=0.0)
    coefficients = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'version': self.version,
            'target': self.target,
            'intercept': self.intercept,
            'coefficients': dict(self.coefficients or {}),
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
