from marshmallow import fields, validate
from flatshare.extension import ma
from flatshare.models import ShoppingList, Item


class ItemSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Item
        load_instance = True
        include_fk = True  # shopping_list_id, added_by_id, bought_by_id

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")


class ShoppingListSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = ShoppingList
        load_instance = True
        include_fk = True

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    items = fields.List(fields.Nested(ItemSchema), dump_only=True)


# For creating/updating
class ItemInputSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    quantity = fields.Integer(load_default=1, validate=validate.Range(min=1))
    status = fields.String(required=False, allow_none=True)


class ItemCreateSchema(ItemInputSchema):
    shopping_list_id = fields.Integer(required=True)


class ItemUpdateSchema(ma.Schema):
    name = fields.String(validate=validate.Length(min=1))
    quantity = fields.Integer(validate=validate.Range(min=1))
    status = fields.String()


class ShoppingListCreateSchema(ma.Schema):
    title = fields.String(required=True, validate=validate.Length(min=1))
    is_private = fields.Boolean(load_default=False)
    items = fields.List(fields.Nested(ItemInputSchema), load_default=list)


class AddItemsSchema(ma.Schema):
    items = fields.List(fields.Nested(ItemInputSchema), required=True)


class ProductSuggestionSchema(ma.Schema):
    id = fields.Integer()
    name = fields.String()
