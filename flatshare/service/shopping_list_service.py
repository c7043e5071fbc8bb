import logging
from sqlalchemy import func
from flatshare.extension import db
from flatshare.models import ShoppingList, Item, ProductSuggestion
from flatshare.exceptions import ValidationError, NotFoundError
from flatshare.utils.roles import ITEM_OPEN, ITEM_BOUGHT, ITEM_STATUSES

logger = logging.getLogger(__name__)

MAX_FREQUENT_SUGGESTIONS = 3


def parse_status(status, default=ITEM_OPEN):
    if status is None:
        return default
    normalized = str(status).strip().upper()
    if normalized not in ITEM_STATUSES:
        raise ValidationError(f"Invalid item status '{status}'. Use one of: {', '.join(ITEM_STATUSES)}")
    return normalized


class ShoppingListService:

    @staticmethod
    def get_visible(user, list_id):
        shopping_list = db.session.get(ShoppingList, list_id)
        if not shopping_list or not shopping_list.is_visible_to(user):
            raise NotFoundError("Shopping list not found")
        return shopping_list

    @staticmethod
    def own_lists(user):
        return (
            ShoppingList.query
            .filter_by(owner_id=user.id, is_private=True)
            .order_by(ShoppingList.id)
            .all()
        )

    @staticmethod
    def shared_lists(user):
        if user.group_id is None:
            return []
        return (
            ShoppingList.query
            .filter_by(group_id=user.group_id, is_private=False)
            .order_by(ShoppingList.id)
            .all()
        )

    @staticmethod
    def visible_lists(user):
        return ShoppingListService.own_lists(user) + ShoppingListService.shared_lists(user)

    @staticmethod
    def create_with_items(user, title, is_private=False, items=None):
        if not is_private and user.group_id is None:
            raise ValidationError("Join a group before creating a shared list")

        shopping_list = ShoppingList(
            title=title,
            is_private=bool(is_private),
            owner=user,
            group_id=None if is_private else user.group_id
        )
        for item_data in items or []:
            shopping_list.items.append(Item(
                name=item_data["name"],
                quantity=item_data.get("quantity", 1),
                status=parse_status(item_data.get("status")),
                added_by=user
            ))

        db.session.add(shopping_list)
        db.session.commit()
        logger.info(f"Shopping list {shopping_list.id} created with {len(shopping_list.items)} item(s)")
        return shopping_list

    @staticmethod
    def add_items(user, list_id, items):
        shopping_list = ShoppingListService.get_visible(user, list_id)
        new_items = [
            Item(
                name=item_data["name"],
                quantity=item_data.get("quantity", 1),
                status=ITEM_OPEN,
                added_by=user,
                shopping_list=shopping_list
            )
            for item_data in items
        ]
        db.session.add_all(new_items)
        db.session.commit()
        logger.info(f"{len(new_items)} item(s) added to shopping list {list_id}")
        return new_items

    @staticmethod
    def delete_list(user, list_id):
        shopping_list = ShoppingListService.get_visible(user, list_id)
        db.session.delete(shopping_list)
        db.session.commit()
        logger.info(f"Shopping list {list_id} deleted")

    @staticmethod
    def get_item(user, item_id):
        item = db.session.get(Item, item_id)
        if not item or not item.shopping_list.is_visible_to(user):
            raise NotFoundError("Item not found")
        return item

    @staticmethod
    def add_item(user, list_id, name, quantity=1, status=None):
        shopping_list = ShoppingListService.get_visible(user, list_id)
        status = parse_status(status)
        item = Item(
            name=name,
            quantity=quantity,
            status=status,
            added_by=user,
            bought_by=user if status == ITEM_BOUGHT else None,
            shopping_list=shopping_list
        )
        db.session.add(item)
        db.session.commit()
        return item

    @staticmethod
    def update_item(user, item_id, data):
        item = ShoppingListService.get_item(user, item_id)
        if "name" in data:
            item.name = data["name"]
        if "quantity" in data:
            item.quantity = data["quantity"]
        if "status" in data:
            item.status = parse_status(data["status"])
            item.bought_by = user if item.status == ITEM_BOUGHT else None
        db.session.commit()
        return item

    @staticmethod
    def delete_item(user, item_id):
        item = ShoppingListService.get_item(user, item_id)
        item.shopping_list.items.remove(item)
        db.session.commit()

    @staticmethod
    def items_of_list(user, list_id, status=None):
        shopping_list = ShoppingListService.get_visible(user, list_id)
        if status is None:
            return list(shopping_list.items)
        return [item for item in shopping_list.items if item.status == status]

    @staticmethod
    def frequent_item_suggestions(user):
        """Names the user buys most on private lists, minus what is already open there."""
        open_names = {
            item.name.lower()
            for shopping_list in ShoppingListService.own_lists(user)
            for item in shopping_list.items
            if item.status == ITEM_OPEN
        }

        frequent = (
            db.session.query(Item.name)
            .join(ShoppingList, ShoppingList.id == Item.shopping_list_id)
            .filter(
                ShoppingList.owner_id == user.id,
                ShoppingList.is_private.is_(True),
                Item.status == ITEM_BOUGHT
            )
            .group_by(Item.name)
            .order_by(func.count(Item.name).desc(), Item.name)
            .all()
        )

        suggestions = [name for (name,) in frequent if name.lower() not in open_names]
        return suggestions[:MAX_FREQUENT_SUGGESTIONS]

    @staticmethod
    def search_product_suggestions(query):
        pattern = f"%{(query or '').strip()}%"
        return (
            ProductSuggestion.query
            .filter(ProductSuggestion.name.ilike(pattern))
            .order_by(ProductSuggestion.name)
            .all()
        )
