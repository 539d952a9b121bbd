"""
Post Model
"""

from datetime import datetime

from inkwell.extensions import db
from inkwell.models.ids import ID_LENGTH, new_id


class Post(db.Model):
    """Blog post.

    ``author`` is a copy of the author's public record taken when the post was
    written (or last edited). It is not refreshed when the user changes.
    """
    __tablename__ = 'blogs'
    
    id = db.Column(db.String(ID_LENGTH), primary_key=True, default=new_id)
    title = db.Column(db.Text)
    content = db.Column(db.Text)
    author_id = db.Column(db.String(ID_LENGTH), db.ForeignKey('users.id'), nullable=False, index=True)
    author = db.Column(db.JSON, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def __repr__(self):
        return f'<Post {self.id} by {self.author_id}>'
