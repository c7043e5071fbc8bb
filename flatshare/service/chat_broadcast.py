# Fan-out of persisted chat state to whoever listens on a group's topic.
import logging
import threading

logger = logging.getLogger(__name__)

_listeners = []
_listeners_lock = threading.Lock()


def group_topic(group_id):
    return f"/topic/group/{group_id}"


def subscribe(listener):
    """Register a callable(topic, payload); returns it so it can be used as a decorator."""
    with _listeners_lock:
        _listeners.append(listener)
    return listener


def unsubscribe(listener):
    with _listeners_lock:
        if listener in _listeners:
            _listeners.remove(listener)


def publish(group_id, payload):
    topic = group_topic(group_id)
    with _listeners_lock:
        listeners = list(_listeners)
    for listener in listeners:
        listener(topic, payload)
    logger.info(f"Broadcast message {payload.get('id')} to {topic} ({len(listeners)} listener(s))")
