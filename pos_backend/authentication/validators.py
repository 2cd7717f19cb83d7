# pos_backend/authentication/validators.py
import re
from datetime import datetime

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^\+?[0-9]{7,15}$")


def parse_iso_date(value):
    """Parse ``YYYY-MM-DD`` or a full ISO-8601 timestamp into a ``date``."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).date()


def not_empty(value):
    return isinstance(value, str) and value.strip() != ''


def is_email(value):
    return isinstance(value, str) and bool(EMAIL_RE.match(value))


def is_mobile_phone(value):
    return isinstance(value, str) and bool(PHONE_RE.match(value))


def is_iso_date(value):
    if not isinstance(value, str):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def min_length(n):
    def check(value):
        return isinstance(value, str) and len(value) >= n
    return check


def field(name, *checks):
    """Build a validator for one field from ``(predicate, message)`` pairs.

    Checks run in order and stop at the first failure, so each field
    contributes at most one error.
    """
    def check_field(data):
        value = data.get(name)
        for predicate, message in checks:
            if not predicate(value):
                return [{'field': name, 'msg': message, 'value': value}]
        return []
    return check_field


def run_validators(data, validators):
    errors = []
    for validate in validators:
        errors.extend(validate(data))
    return errors


def _public_value(name, value):
    return '' if name == 'password' else value


def registration_rules(email_available):
    """Rules for /register; ``email_available`` checks the store for an existing account."""
    return [
        field('name', (not_empty, 'Name is required')),
        field('email', (is_email, 'Invalid email address'), (email_available, 'Email already in use')),
        field('password', (min_length(6), 'Password must be at least 6 characters long')),
        field('dateOfBirth', (is_iso_date, 'Date of birth must be a valid date')),
        field('phoneNumber', (is_mobile_phone, 'Invalid phone number')),
    ]


LOGIN_RULES = [
    field('email', (is_email, 'Invalid email address')),
    field('password', (not_empty, 'Password is required')),
]


ADMIN_RULES = [
    field('username', (not_empty, 'Username is required')),
    field('password', (not_empty, 'Password is required')),
]


def validate(data, rules):
    """Run ``rules`` over ``data``; passwords are blanked in the returned errors."""
    errors = run_validators(data, rules)
    for error in errors:
        error['value'] = _public_value(error['field'], error['value'])
    return errors
