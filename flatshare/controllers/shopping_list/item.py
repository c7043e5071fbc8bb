from flask import g
from flask_restful import Resource, Api
from flatshare.schemas.shopping_list_schema import ItemSchema, ItemCreateSchema, ItemUpdateSchema
from flatshare.service.shopping_list_service import ShoppingListService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json, no_content
from flatshare.utils.roles import ITEM_OPEN
from . import shopping_list_bp

item_schema = ItemSchema()
item_list_schema = ItemSchema(many=True)
item_create_schema = ItemCreateSchema()
item_update_schema = ItemUpdateSchema()
api = Api(shopping_list_bp)


class ItemResource(Resource):

    @login_required
    def post(self):
        data = load_json(item_create_schema)
        item = ShoppingListService.add_item(
            g.current_user,
            data["shopping_list_id"],
            name=data["name"],
            quantity=data["quantity"],
            status=data.get("status")
        )
        return item_schema.dump(item), 201

    @login_required
    def put(self, item_id):
        data = load_json(item_update_schema)
        item = ShoppingListService.update_item(g.current_user, item_id, data)
        return item_schema.dump(item), 200

    @login_required
    def delete(self, item_id):
        ShoppingListService.delete_item(g.current_user, item_id)
        return no_content()


class ItemsByListResource(Resource):
    @login_required
    def get(self, list_id):
        return item_list_schema.dump(ShoppingListService.items_of_list(g.current_user, list_id)), 200


class OpenItemsByListResource(Resource):
    @login_required
    def get(self, list_id):
        items = ShoppingListService.items_of_list(g.current_user, list_id, status=ITEM_OPEN)
        return item_list_schema.dump(items), 200


# Register resource
api.add_resource(ItemResource, "/items", "/items/<int:item_id>")
api.add_resource(ItemsByListResource, "/items/by-list/<int:list_id>")
api.add_resource(OpenItemsByListResource, "/items/by-list/<int:list_id>/open")
