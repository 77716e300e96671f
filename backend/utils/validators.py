import re

# Dot-separated local atoms; domain labels can't be empty or start/end with '-'
EMAIL_PATTERN = re.compile(
    r'^[a-zA-Z0-9_%+-]+(?:\.[a-zA-Z0-9_%+-]+)*'
    r'@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}$'
)


def validate_email(email):
    """Validate email format"""
    return EMAIL_PATTERN.match(email) is not None


def min_length(length):
    """Check that a trimmed value has at least `length` characters"""
    def check(value):
        return len(value) >= length
    return check


def not_empty(value):
    return value != ''


def one_of(options):
    """Check a non-empty value against the allowed options (any value if none configured)"""
    allowed = set(options)

    def check(value):
        return not value or not allowed or value in allowed
    return check


class Rule:
    """A single field check with the message reported when it fails"""

    def __init__(self, field, check, message):
        self.field = field
        self.check = check
        self.message = message

    def __repr__(self):
        return f'<Rule {self.field}: {self.message}>'


class FormRules:
    """Ordered rules for one form plus the optional fields that are only trimmed"""

    def __init__(self, rules, optional=()):
        self.rules = list(rules)
        self.optional = tuple(optional)

    @property
    def fields(self):
        seen = []
        for rule in self.rules:
            if rule.field not in seen:
                seen.append(rule.field)
        return seen


class FieldError:
    def __init__(self, field, message, value=''):
        self.field = field
        self.message = message
        self.value = value

    def __repr__(self):
        return f'<FieldError {self.field}: {self.message}>'

    def __eq__(self, other):
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field, self.message, self.value) == (other.field, other.message, other.value)

    def to_dict(self):
        # type/path/msg/location mirror the express-validator entries older frontends read
        return {
            'field': self.field,
            'message': self.message,
            'value': self.value,
            'type': 'field',
            'path': self.field,
            'msg': self.message,
            'location': 'body',
        }


class ValidationError(Exception):
    """Raised when a submission breaks one or more field rules"""

    def __init__(self, errors):
        self.errors = list(errors)
        fields = ', '.join(error.field for error in self.errors)
        super().__init__(f"Validation failed for: {fields}")


def normalize_value(value):
    """Turn a raw JSON value into a trimmed string ('' when unusable)"""
    if isinstance(value, bool) or value is None:
        return ''
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return ''


def validate_form(data, form_rules):
    """
    Run every rule of a form against raw request data.

    All rules are evaluated so the caller gets the full list of problems.

    Args:
        data: Raw field mapping (usually the parsed JSON body)
        form_rules: FormRules for the submitted form

    Returns:
        tuple: (cleaned fields dict, list of FieldError). No errors means accepted.
    """
    if not isinstance(data, dict):
        data = {}

    cleaned = {}
    for field in form_rules.fields:
        cleaned[field] = normalize_value(data.get(field))
    for field in form_rules.optional:
        value = normalize_value(data.get(field))
        if value:
            cleaned[field] = value

    errors = []
    for rule in form_rules.rules:
        value = cleaned[rule.field]
        if not rule.check(value):
            errors.append(FieldError(rule.field, rule.message, value))

    return cleaned, errors


NAME_RULE = Rule('name', min_length(2), 'Name must be at least 2 characters')
EMAIL_RULE = Rule('email', validate_email, 'Please provide a valid email')

CONTACT_RULES = FormRules(
    [
        NAME_RULE,
        EMAIL_RULE,
        Rule('message', min_length(10), 'Message must be at least 10 characters'),
    ],
    optional=['company'],
)


def inquiry_rules(charger_types=None):
    """Rules for the product inquiry form, restricted to `charger_types` when given"""
    rules = [
        NAME_RULE,
        EMAIL_RULE,
        Rule('phone', min_length(10), 'Phone number must be at least 10 characters'),
        Rule('chargerType', not_empty, 'Please select a charger type'),
    ]
    if charger_types:
        rules.append(Rule('chargerType', one_of(charger_types), 'Please select a valid charger type'))
    return FormRules(rules, optional=['message'])


INQUIRY_RULES = inquiry_rules()
