PERMISSION_MEMBER = "member"
PERMISSION_ADMIN = "admin"

MESSAGE_TEXT = "TEXT"
MESSAGE_POLL = "POLL"

ITEM_OPEN = "OPEN"
ITEM_BOUGHT = "BOUGHT"

ITEM_STATUSES = (ITEM_OPEN, ITEM_BOUGHT)
