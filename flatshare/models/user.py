from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from flatshare.extension import db
from flatshare.utils.roles import PERMISSION_ADMIN


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    username = db.Column(db.String(120), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    avatar_url = db.Column(db.String(512), nullable=True)
    paypal_email = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # a user belongs to at most one group
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id"), nullable=True)
    permission = db.Column(db.String(20), nullable=True)  # member, admin

    # Relationships
    group = db.relationship("Group", back_populates="members")

    @property
    def is_admin(self):
        return self.permission == PERMISSION_ADMIN

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User {self.id} {self.email}>"
