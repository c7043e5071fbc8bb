from datetime import datetime
from flatshare.extension import db


class Group(db.Model):
    __tablename__ = "groups"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    join_code = db.Column(db.String(6), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    members = db.relationship(
        "User",
        back_populates="group",
        order_by="User.id"
    )
    shopping_lists = db.relationship("ShoppingList", back_populates="group")

    def has_member(self, user):
        return user is not None and user.group_id == self.id

    def __repr__(self):
        return f"<Group {self.id} {self.join_code}>"
