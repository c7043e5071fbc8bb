from datetime import datetime
from flatshare.extension import db
from flatshare.utils.roles import ITEM_OPEN


class ShoppingList(db.Model):
    __tablename__ = "shopping_lists"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    is_private = db.Column(db.Boolean, nullable=False, default=False)
    owner_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    owner = db.relationship("User")
    group = db.relationship("Group", back_populates="shopping_lists")
    items = db.relationship(
        "Item",
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        order_by="Item.id"
    )

    def is_visible_to(self, user):
        if self.is_private:
            return self.owner_id == user.id
        return self.group_id is not None and self.group_id == user.group_id


class Item(db.Model):
    __tablename__ = "items"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(db.String(10), nullable=False, default=ITEM_OPEN)  # OPEN, BOUGHT
    shopping_list_id = db.Column(db.Integer, db.ForeignKey("shopping_lists.id"), nullable=False)
    added_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    bought_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    shopping_list = db.relationship("ShoppingList", back_populates="items")
    added_by = db.relationship("User", foreign_keys=[added_by_id])
    bought_by = db.relationship("User", foreign_keys=[bought_by_id])
