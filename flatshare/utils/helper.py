from flask import Response, request
from marshmallow import ValidationError as SchemaValidationError
from flatshare.exceptions import ValidationError


def flatten_errors(messages, prefix=""):
    """Turn marshmallow's nested error dict into a flat list of readable strings."""
    if isinstance(messages, str):
        return [f"{prefix}{messages}" if prefix else messages]
    if isinstance(messages, (list, tuple)):
        errors = []
        for message in messages:
            errors.extend(flatten_errors(message, prefix))
        return errors
    errors = []
    for key, value in messages.items():
        label = f"{prefix}{key}: " if key != "_schema" else prefix
        errors.extend(flatten_errors(value, label))
    return errors


def load_json(schema, data=None):
    """Validate the request body with `schema`, raising ValidationError on bad input."""
    if data is None:
        data = request.get_json(silent=True) or {}
    try:
        return schema.load(data)
    except SchemaValidationError as err:
        raise ValidationError("Invalid request data", errors=flatten_errors(err.messages))


def no_content():
    """Empty 204 response; flask-restful passes Response objects through untouched."""
    return Response(status=204)
