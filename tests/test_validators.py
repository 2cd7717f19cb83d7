import unittest
from datetime import date

from app_case import AppTestCase  # noqa: F401  (puts the project root on sys.path)
from pos_backend.authentication.validators import (
    validate, registration_rules, field, not_empty, parse_iso_date, is_mobile_phone,
    is_email, is_iso_date, LOGIN_RULES, ADMIN_RULES
)


def always_available(email):
    return True


VALID = {
    'name': 'Asha Raman',
    'email': 'asha@example.com',
    'password': 'secret123',
    'dateOfBirth': '1994-08-21',
    'phoneNumber': '+919876543210',
}


class TestValidators(unittest.TestCase):
    def test_valid_registration_has_no_errors(self):
        self.assertEqual(validate(dict(VALID), registration_rules(always_available)), [])

    def test_each_field_reports_its_message(self):
        data = {
            'name': '  ',
            'email': 'not-an-email',
            'password': '123',
            'dateOfBirth': '2021-02-30',
            'phoneNumber': 'call me',
        }
        errors = validate(data, registration_rules(always_available))
        messages = {e['field']: e['msg'] for e in errors}
        self.assertEqual(messages, {
            'name': 'Name is required',
            'email': 'Invalid email address',
            'password': 'Password must be at least 6 characters long',
            'dateOfBirth': 'Date of birth must be a valid date',
            'phoneNumber': 'Invalid phone number',
        })

    def test_password_value_is_not_echoed(self):
        errors = validate(dict(VALID, password='abc'), registration_rules(always_available))
        self.assertEqual(errors, [{
            'field': 'password',
            'msg': 'Password must be at least 6 characters long',
            'value': '',
        }])

    def test_taken_email_only_checked_after_format(self):
        calls = []

        def taken(email):
            calls.append(email)
            return False

        errors = validate(dict(VALID, email='bad'), registration_rules(taken))
        self.assertEqual(calls, [])
        self.assertEqual(errors[0]['msg'], 'Invalid email address')

        errors = validate(dict(VALID), registration_rules(taken))
        self.assertEqual(calls, ['asha@example.com'])
        self.assertEqual(errors[0]['msg'], 'Email already in use')

    def test_field_stops_at_first_failure(self):
        rule = field('code', (not_empty, 'Code is required'), (lambda v: v.isdigit(), 'Digits only'))
        self.assertEqual(len(rule({})), 1)
        self.assertEqual(rule({'code': 'ab'})[0]['msg'], 'Digits only')
        self.assertEqual(rule({'code': '42'}), [])

    def test_login_and_admin_rules(self):
        self.assertEqual(len(validate({}, LOGIN_RULES)), 2)
        self.assertEqual(validate({'email': 'a@b.co', 'password': 'x'}, LOGIN_RULES), [])
        self.assertEqual(len(validate({'username': 'boss'}, ADMIN_RULES)), 1)

    def test_primitive_checks(self):
        self.assertTrue(is_email('ravi.k@shop.in'))
        self.assertFalse(is_email('ravi@shop'))
        self.assertFalse(is_email(42))
        self.assertTrue(is_mobile_phone('9876543210'))
        self.assertFalse(is_mobile_phone('12345'))
        self.assertFalse(is_mobile_phone(9876543210))
        self.assertTrue(is_iso_date('2000-01-01T10:30:00Z'))
        self.assertFalse(is_iso_date('01/01/2000'))

    def test_parse_iso_date(self):
        self.assertEqual(parse_iso_date('1994-08-21'), date(1994, 8, 21))
        self.assertEqual(parse_iso_date('1994-08-21T00:00:00.000Z'), date(1994, 8, 21))
        with self.assertRaises(ValueError):
            parse_iso_date('yesterday')


if __name__ == '__main__':
    unittest.main()
