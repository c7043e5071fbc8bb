from flatshare.extension import db


class ProductSuggestion(db.Model):
    __tablename__ = "product_suggestions"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    # null for the seeded catalog
    created_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
