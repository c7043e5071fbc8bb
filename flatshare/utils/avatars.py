import uuid

AVATAR_BASE_URL = "https://api.dicebear.com/7.x/personas"
DELETED_USER_AVATAR = "https://api.dicebear.com/7.x/bottts-neutral/png?seed=deletedUser"
DELETED_USER_ID = -1
DELETED_USER_NAME = "Deleted user"


def random_avatar_url():
    seed = uuid.uuid4().hex[:8]
    return f"{AVATAR_BASE_URL}/svg?seed={seed}"


def normalize_avatar_url(avatar_url, username):
    """Clients render PNG only: fill in a default and swap SVG endpoints."""
    if not avatar_url or not avatar_url.strip():
        return f"{AVATAR_BASE_URL}/png?seed={username}"
    if "/svg" in avatar_url:
        return avatar_url.replace("/svg", "/png")
    return avatar_url


def user_card(user):
    """Compact user representation used inside payments and balances."""
    if user is None:
        return {
            "id": DELETED_USER_ID,
            "username": DELETED_USER_NAME,
            "avatar_url": DELETED_USER_AVATAR,
        }
    return {
        "id": user.id,
        "username": user.username,
        "avatar_url": normalize_avatar_url(user.avatar_url, user.username),
    }
