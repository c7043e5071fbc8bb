import logging
from datetime import datetime
from flatshare.extension import db
from flatshare.models import ChatMessage
from flatshare.exceptions import ForbiddenError, ValidationError
from flatshare.schemas.chat_schema import ChatMessageSchema
from flatshare.service import chat_broadcast
from flatshare.service.group_membership import GroupMembershipService
from flatshare.utils.poll import Poll
from flatshare.utils.roles import MESSAGE_TEXT, MESSAGE_POLL

logger = logging.getLogger(__name__)

message_schema = ChatMessageSchema()


def _as_int(value):
    # bools are ints in Python but never valid ids
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class ChatService:

    @staticmethod
    def messages_for_group(user, group_id):
        group = GroupMembershipService.get(group_id)
        if not group.has_member(user):
            raise ForbiddenError("You are not a member of this group")

        return (
            ChatMessage.query
            .filter_by(group_id=group.id)
            .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
            .all()
        )

    @staticmethod
    def send_message(sender, group_id, content=None, message_type=None, options=None):
        group = GroupMembershipService.get(group_id)
        if not group.has_member(sender):
            raise ForbiddenError("You are not a member of this group")

        message_type = (message_type or MESSAGE_TEXT).upper()
        if message_type not in (MESSAGE_TEXT, MESSAGE_POLL):
            message_type = MESSAGE_TEXT

        message = ChatMessage(
            content=content,
            sender=sender,
            group=group,
            type=message_type,
            timestamp=datetime.utcnow()
        )
        if message_type == MESSAGE_POLL:
            if not options:
                raise ValidationError("A poll needs at least one option")
            message.poll = Poll.from_names(options)

        db.session.add(message)
        db.session.commit()

        payload = message_schema.dump(message)
        chat_broadcast.publish(group.id, payload)
        return message

    @staticmethod
    def cast_vote(voter, payload):
        """
        Record a poll vote. Incomplete or unusable payloads are dropped and None is
        returned; votes travel over a best-effort channel with no error reply.
        """
        message_id = _as_int(payload.get("message_id"))
        option_index = _as_int(payload.get("option_index"))
        if message_id is None or option_index is None:
            return None

        message = db.session.get(ChatMessage, message_id)
        if message is None or not message.is_poll:
            return None
        if not message.group.has_member(voter):
            return None

        poll = message.poll
        if poll is None:
            return None
        try:
            poll.vote(voter.id, option_index)
        except IndexError:
            return None

        # read-modify-write on the JSON column: concurrent votes are last write wins
        message.poll = poll
        db.session.commit()

        logger.info(f"User {voter.id} voted option {option_index} on poll {message.id}")
        chat_broadcast.publish(message.group_id, message_schema.dump(message))
        return message
