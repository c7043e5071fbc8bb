import logging
import uuid
from flatshare.extension import db
from flatshare.models import Group, User
from flatshare.exceptions import ValidationError, NotFoundError, ForbiddenError, ConflictError
from flatshare.utils.roles import PERMISSION_ADMIN, PERMISSION_MEMBER

logger = logging.getLogger(__name__)


def generate_join_code():
    """6 uppercase hex characters from a random UUID; collisions are not checked."""
    return uuid.uuid4().hex[:6].upper()


class GroupMembershipService:

    @staticmethod
    def get(group_id):
        group = db.session.get(Group, group_id)
        if not group:
            raise NotFoundError(f"Group {group_id} not found")
        return group

    @staticmethod
    def find_by_join_code(join_code):
        code = (join_code or "").strip().upper()
        group = Group.query.filter_by(join_code=code).first()
        if not group:
            raise NotFoundError("No group found for this join code")
        return group

    @staticmethod
    def first_other_member(group_id, excluded_user_id):
        return (
            User.query
            .filter(User.group_id == group_id, User.id != excluded_user_id)
            .order_by(User.id)
            .first()
        )

    @staticmethod
    def promote_successor(group_id, leaving_user_id):
        """Hand the admin role to the first remaining member, if there is one."""
        successor = GroupMembershipService.first_other_member(group_id, leaving_user_id)
        if successor:
            successor.permission = PERMISSION_ADMIN
            logger.info(f"User {successor.id} promoted to admin of group {group_id}")
        return successor

    @staticmethod
    def detach(user):
        user.group = None
        user.permission = None

    @staticmethod
    def create_with_founder(founder, name):
        if founder.group_id is not None:
            raise ConflictError("You are already a member of a group")
        if not name or not name.strip():
            raise ValidationError("Group name is required")

        group = Group(name=name.strip(), join_code=generate_join_code())
        db.session.add(group)
        founder.group = group
        founder.permission = PERMISSION_ADMIN
        db.session.commit()

        logger.info(f"Group {group.id} created by user {founder.id} with code {group.join_code}")
        return group

    @staticmethod
    def add_member(group, user):
        if user.group_id == group.id:
            return group
        if user.group_id is not None:
            raise ConflictError("User is already a member of another group")

        user.group = group
        user.permission = PERMISSION_MEMBER
        db.session.commit()

        logger.info(f"User {user.id} joined group {group.id}")
        return group

    @staticmethod
    def remove_member(group, user):
        if not group.has_member(user):
            raise ValidationError("User is not a member of the group")

        was_admin = user.is_admin
        GroupMembershipService.detach(user)
        db.session.flush()

        if was_admin:
            GroupMembershipService.promote_successor(group.id, user.id)

        db.session.commit()
        logger.info(f"User {user.id} left group {group.id}")
        return group

    @staticmethod
    def kick(group, requester, target):
        if not group.has_member(requester) or not group.has_member(target):
            raise ForbiddenError("Users not in the same group")
        if not requester.is_admin:
            raise ForbiddenError("Only admins can remove users")
        if requester.id == target.id:
            raise ForbiddenError("Admins cannot remove themselves")

        GroupMembershipService.detach(target)
        db.session.commit()

        logger.info(f"User {target.id} removed from group {group.id} by admin {requester.id}")
        return group
