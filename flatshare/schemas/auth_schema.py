from marshmallow import EXCLUDE, fields, validate
from flatshare.extension import ma

USERNAME_PATTERN = r"^[a-zA-ZäöüÄÖÜß ]+$"
PASSWORD_PATTERN = r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*[@#$%^&+=!]).*$"

USERNAME_VALIDATORS = [
    validate.Length(min=3, max=20, error="Username must be between 3 and 20 characters long"),
    validate.Regexp(USERNAME_PATTERN, error="Username may only contain letters and spaces"),
]


class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(
        required=True,
        validate=USERNAME_VALIDATORS,
        error_messages={"required": "Username must not be empty"}
    )
    email = fields.Email(
        required=True,
        error_messages={"required": "Email must not be empty", "invalid": "Please enter a valid email address"}
    )
    password = fields.String(
        required=True,
        load_only=True,
        validate=[
            validate.Length(min=6, error="Password must be at least 6 characters long"),
            validate.Regexp(
                PASSWORD_PATTERN,
                error="Password must contain a digit, a lowercase letter, an uppercase letter "
                      "and a special character (@#$%^&+=!)"
            ),
        ],
        error_messages={"required": "Password must not be empty"}
    )


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)
