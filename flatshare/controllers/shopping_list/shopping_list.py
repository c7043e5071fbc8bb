from flask import g
from flask_restful import Resource, Api
from flatshare.schemas.shopping_list_schema import (
    ShoppingListSchema, ShoppingListCreateSchema, AddItemsSchema, ItemSchema
)
from flatshare.service.shopping_list_service import ShoppingListService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json, no_content
from . import shopping_list_bp

api = Api(shopping_list_bp)

# Schemas
shopping_list_schema = ShoppingListSchema()
shopping_lists_schema = ShoppingListSchema(many=True)
shopping_list_create_schema = ShoppingListCreateSchema()
add_items_schema = AddItemsSchema()
items_schema = ItemSchema(many=True)


class ShoppingListResource(Resource):

    @login_required
    def get(self, list_id=None):
        current_user = g.current_user
        if list_id:
            shopping_list = ShoppingListService.get_visible(current_user, list_id)
            return shopping_list_schema.dump(shopping_list), 200

        return shopping_lists_schema.dump(ShoppingListService.visible_lists(current_user)), 200

    @login_required
    def post(self):
        data = load_json(shopping_list_create_schema)
        shopping_list = ShoppingListService.create_with_items(
            g.current_user,
            title=data["title"].strip(),
            is_private=data["is_private"],
            items=data["items"]
        )
        return shopping_list_schema.dump(shopping_list), 201

    @login_required
    def delete(self, list_id):
        ShoppingListService.delete_list(g.current_user, list_id)
        return no_content()


class OwnShoppingListsResource(Resource):
    @login_required
    def get(self):
        return shopping_lists_schema.dump(ShoppingListService.own_lists(g.current_user)), 200


class SharedShoppingListsResource(Resource):
    @login_required
    def get(self):
        return shopping_lists_schema.dump(ShoppingListService.shared_lists(g.current_user)), 200


class ShoppingListItemsResource(Resource):
    @login_required
    def post(self, list_id):
        data = load_json(add_items_schema)
        items = ShoppingListService.add_items(g.current_user, list_id, data["items"])
        return items_schema.dump(items), 201


class FrequentItemSuggestionsResource(Resource):
    @login_required
    def get(self):
        return ShoppingListService.frequent_item_suggestions(g.current_user), 200


api.add_resource(ShoppingListResource, "/shopping-lists", "/shopping-lists/<int:list_id>")
api.add_resource(OwnShoppingListsResource, "/shopping-lists/own")
api.add_resource(SharedShoppingListsResource, "/shopping-lists/shared")
api.add_resource(ShoppingListItemsResource, "/shopping-lists/<int:list_id>/items")
api.add_resource(FrequentItemSuggestionsResource, "/shopping-lists/suggestions")
