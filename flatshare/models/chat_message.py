from datetime import datetime
from flatshare.extension import db
from flatshare.utils.roles import MESSAGE_TEXT, MESSAGE_POLL
from flatshare.utils.poll import Poll


class ChatMessage(db.Model):
    __tablename__ = "messages"

    id = db.Column(db.Integer, primary_key=True)
    content = db.Column(db.Text, nullable=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    type = db.Column(db.String(10), nullable=False, default=MESSAGE_TEXT)  # TEXT, POLL
    # `metadata` is reserved on declarative models
    poll_data = db.Column("metadata", db.JSON, nullable=True)
    sender_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id"), nullable=False)

    # Relationships
    sender = db.relationship("User")
    group = db.relationship("Group")

    @property
    def is_poll(self):
        return self.type == MESSAGE_POLL

    @property
    def poll(self):
        if not self.is_poll or self.poll_data is None:
            return None
        return Poll.from_dict(self.poll_data)

    @poll.setter
    def poll(self, poll):
        # assign a fresh dict so the JSON column is flagged dirty
        self.poll_data = poll.to_dict() if poll is not None else None

    @property
    def sender_name(self):
        return self.sender.username if self.sender else "Deleted user"
