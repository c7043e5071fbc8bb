from marshmallow import fields
from flatshare.extension import ma
from flatshare.models import ChatMessage


class ChatMessageSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = ChatMessage
        load_instance = True
        include_fk = True
        exclude = ("poll_data",)

    timestamp = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    sender_name = fields.String(dump_only=True)
    poll = fields.Method("get_poll", dump_only=True)

    def get_poll(self, obj):
        poll = obj.poll
        return poll.to_dict() if poll else None


# For sending
class ChatMessageCreateSchema(ma.Schema):
    content = fields.String(required=False, allow_none=True)
    type = fields.String(required=False, load_default="TEXT")
    options = fields.List(fields.String(), required=False, load_default=list)
