class ContactSubmission:
    """General contact form submission (already validated)"""

    def __init__(self, name, email, message, company=None):
        self.name = name
        self.email = email
        self.message = message
        self.company = company or None

    def __repr__(self):
        return f'<ContactSubmission {self.email}>'

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            email=data['email'],
            message=data['message'],
            company=data.get('company'),
        )


class InquirySubmission:
    """Product inquiry form submission (already validated)"""

    def __init__(self, name, email, phone, charger_type, message=None):
        self.name = name
        self.email = email
        self.phone = phone
        self.charger_type = charger_type
        self.message = message or None

    def __repr__(self):
        return f'<InquirySubmission {self.email} {self.charger_type}>'

    @classmethod
    def from_dict(cls, data):
        # Form payloads use the frontend's camelCase key
        return cls(
            name=data['name'],
            email=data['email'],
            phone=data['phone'],
            charger_type=data['chargerType'],
            message=data.get('message'),
        )
