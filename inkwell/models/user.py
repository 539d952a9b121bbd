"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin

from inkwell.extensions import db
from inkwell.models.ids import ID_LENGTH, new_id


class User(UserMixin, db.Model):
    """Registered author. Username and email are unique at the database level."""
    __tablename__ = 'users'
    
    id = db.Column(db.String(ID_LENGTH), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False, default='')
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def snapshot(self):
        """Public fields copied into each post this user writes."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'username': self.username,
        }
    
    def __repr__(self):
        return f'<User {self.username}>'
