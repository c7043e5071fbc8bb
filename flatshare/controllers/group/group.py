from flask import g
from flask_restful import Resource, Api
from flatshare.extension import db
from flatshare.models import User
from flatshare.exceptions import NotFoundError
from flatshare.schemas.group_schema import GroupSchema, GroupCreateSchema, JoinGroupSchema
from flatshare.service.group_membership import GroupMembershipService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json, no_content
from . import group_bp

api = Api(group_bp)

# Schemas
group_schema = GroupSchema()
group_summary_schema = GroupSchema(only=("id", "name", "join_code"))
group_create_schema = GroupCreateSchema()
join_group_schema = JoinGroupSchema()


# ---------------------------
# /groups
# ---------------------------
class GroupListResource(Resource):
    @login_required
    def post(self):
        data = load_json(group_create_schema)
        group = GroupMembershipService.create_with_founder(g.current_user, data["name"])
        return {"group": group_schema.dump(group), "message": "Group created successfully"}, 201


class MyGroupResource(Resource):
    @login_required
    def get(self):
        group = g.current_user.group
        if group is None:
            return no_content()
        return {"group": group_schema.dump(group)}, 200


class GroupByCodeResource(Resource):
    @login_required
    def get(self, join_code):
        group = GroupMembershipService.find_by_join_code(join_code)
        return {"group": group_summary_schema.dump(group)}, 200


# ---------------------------
# membership changes
# ---------------------------
class JoinGroupResource(Resource):
    @login_required
    def post(self):
        data = load_json(join_group_schema)
        group = GroupMembershipService.find_by_join_code(data["join_code"])
        GroupMembershipService.add_member(group, g.current_user)
        return {"group": group_schema.dump(group), "message": "Joined group"}, 200


class LeaveGroupResource(Resource):
    @login_required
    def post(self, group_id):
        group = GroupMembershipService.get(group_id)
        GroupMembershipService.remove_member(group, g.current_user)
        return {"message": "You left the group"}, 200


class KickMemberResource(Resource):
    @login_required
    def post(self, group_id, user_id):
        group = GroupMembershipService.get(group_id)
        target = db.session.get(User, user_id)
        if not target:
            raise NotFoundError("User not found")

        GroupMembershipService.kick(group, g.current_user, target)
        return {"message": "User removed from group", "group": group_schema.dump(group)}, 200


# ---------------------------
# Register resources
# ---------------------------
api.add_resource(GroupListResource, "/groups")
api.add_resource(MyGroupResource, "/groups/my")
api.add_resource(GroupByCodeResource, "/groups/code/<string:join_code>")
api.add_resource(JoinGroupResource, "/groups/join")
api.add_resource(LeaveGroupResource, "/groups/<int:group_id>/leave")
api.add_resource(KickMemberResource, "/groups/<int:group_id>/kick/<int:user_id>")
