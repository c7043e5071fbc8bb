from flask import g, request
from flask_restful import Resource, Api
from flatshare.schemas.chat_schema import ChatMessageSchema, ChatMessageCreateSchema
from flatshare.service.chat_service import ChatService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json, no_content
from . import chat_bp

api = Api(chat_bp)

# Schemas
message_schema = ChatMessageSchema()
messages_schema = ChatMessageSchema(many=True)
message_create_schema = ChatMessageCreateSchema()


class GroupMessagesResource(Resource):

    @login_required
    def get(self, group_id):
        messages = ChatService.messages_for_group(g.current_user, group_id)
        return messages_schema.dump(messages), 200

    @login_required
    def post(self, group_id):
        data = load_json(message_create_schema)
        message = ChatService.send_message(
            sender=g.current_user,
            group_id=group_id,
            content=data.get("content"),
            message_type=data.get("type"),
            options=data.get("options")
        )
        return message_schema.dump(message), 201


class VoteResource(Resource):

    @login_required
    def post(self):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return no_content()

        message = ChatService.cast_vote(g.current_user, payload)
        if message is None:
            return no_content()
        return message_schema.dump(message), 200


api.add_resource(GroupMessagesResource, "/chat/groups/<int:group_id>/messages")
api.add_resource(VoteResource, "/chat/votes")
