"""
HTML and plain-text bodies for the form notification emails.

Everything here is a pure function of the submission: no I/O, no config,
so the output can be compared byte for byte in tests.
"""

from html import escape

HEADER_GRADIENT = 'linear-gradient(135deg, #0ea5e9 0%, #10b981 100%)'
PANEL_STYLE = ('background: white; padding: 20px; border-radius: 8px; '
               'box-shadow: 0 1px 3px rgba(0,0,0,0.1); margin-bottom: 20px;')
HEADING_STYLE = 'color: #374151; margin-bottom: 20px;'

CONTACT_NOTE = 'Please respond to this inquiry within 24 hours for the best customer experience.'


class ComposedEmail:
    """Subject, bodies and Reply-To address of one outgoing notification"""

    def __init__(self, subject, html, text, reply_to):
        self.subject = subject
        self.html = html
        self.text = text
        self.reply_to = reply_to

    def __repr__(self):
        return f'<ComposedEmail {self.subject!r}>'

    def __eq__(self, other):
        if not isinstance(other, ComposedEmail):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        return {
            'subject': self.subject,
            'html': self.html,
            'text': self.text,
            'reply_to': self.reply_to,
        }


def text_html(value):
    """Escape user text for an HTML text node"""
    return escape(value, quote=False)


def attr_html(value):
    """Escape user text for an HTML attribute value"""
    return escape(value, quote=True)


def multiline_html(value):
    """Escape free text and keep its line breaks"""
    return text_html(value).replace('\r\n', '\n').replace('\n', '<br>')


def subject_text(value):
    # Header values must stay on one line
    return ' '.join(value.split())


def wrap_document(title, content):
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <div style="background: {HEADER_GRADIENT}; padding: 20px; text-align: center;">
    <h1 style="color: white; margin: 0;">{title}</h1>
  </div>
  <div style="padding: 20px; background: #f9fafb;">
{content}
  </div>
</div>
""".strip()


def notice_block(label, text, background, color):
    return f"""
    <div style="margin-top: 20px; padding: 15px; background: {background}; border-radius: 8px;">
      <p style="margin: 0; color: {color}; font-size: 14px;">
        <strong>{label}:</strong> {text}
      </p>
    </div>"""


def compose_contact_email(submission):
    """
    Build the notification for a contact form submission.

    Args:
        submission: ContactSubmission that already passed validation

    Returns:
        ComposedEmail: replies go straight to the submitter
    """
    name = text_html(submission.name)
    email = text_html(submission.email)

    company_html = ''
    if submission.company:
        company_html = f"""
      <p><strong>Company:</strong> {text_html(submission.company)}</p>"""

    notice = notice_block('Note', CONTACT_NOTE, '#dbeafe', '#1e40af')

    content = f"""
    <h2 style="{HEADING_STYLE}">Contact Details</h2>
    <div style="{PANEL_STYLE}">
      <p><strong>Name:</strong> {name}</p>
      <p><strong>Email:</strong> <a href="mailto:{attr_html(submission.email)}">{email}</a></p>{company_html}
      <p><strong>Message:</strong></p>
      <div style="background: #f3f4f6; padding: 15px; border-radius: 6px; margin-top: 10px;">
        {multiline_html(submission.message)}
      </div>
    </div>{notice}"""

    text_lines = [
        'New Contact Form Submission',
        '',
        f'Name: {submission.name}',
        f'Email: {submission.email}',
    ]
    if submission.company:
        text_lines.append(f'Company: {submission.company}')
    text_lines += ['', 'Message:', submission.message, '', CONTACT_NOTE]

    return ComposedEmail(
        subject=f"New Contact Form Submission from {subject_text(submission.name)}",
        html=wrap_document('New Contact Form Submission', content),
        text='\n'.join(text_lines),
        reply_to=submission.email,
    )


def compose_inquiry_email(submission):
    """Build the notification for a product inquiry (qualified sales lead)"""
    name = text_html(submission.name)
    email = text_html(submission.email)
    phone = text_html(submission.phone)
    charger_type = text_html(submission.charger_type)

    message_html = ''
    if submission.message:
        message_html = f"""
    <h2 style="{HEADING_STYLE}">Additional Message</h2>
    <div style="{PANEL_STYLE}">
      <div style="background: #f3f4f6; padding: 15px; border-radius: 6px;">
        {multiline_html(submission.message)}
      </div>
    </div>"""

    action_text = (
        f"This is a qualified lead for {charger_type}. Please follow up with a detailed "
        "quote and installation timeline within 24 hours."
    )
    notice = notice_block('Action Required', action_text, '#dcfce7', '#166534')

    content = f"""
    <h2 style="{HEADING_STYLE}">Customer Information</h2>
    <div style="{PANEL_STYLE}">
      <p><strong>Name:</strong> {name}</p>
      <p><strong>Email:</strong> <a href="mailto:{attr_html(submission.email)}">{email}</a></p>
      <p><strong>Phone:</strong> <a href="tel:{attr_html(submission.phone)}">{phone}</a></p>
    </div>
    <h2 style="{HEADING_STYLE}">Product Details</h2>
    <div style="{PANEL_STYLE}">
      <p><strong>Interested Product:</strong> <span style="color: #0ea5e9; font-weight: bold;">{charger_type}</span></p>
    </div>{message_html}{notice}"""

    text_lines = [
        'New Product Inquiry',
        '',
        f'Name: {submission.name}',
        f'Email: {submission.email}',
        f'Phone: {submission.phone}',
        f'Interested Product: {submission.charger_type}',
    ]
    if submission.message:
        text_lines += ['', 'Additional Message:', submission.message]
    text_lines += [
        '',
        f"Action Required: This is a qualified lead for {submission.charger_type}. Please follow up "
        "with a detailed quote and installation timeline within 24 hours.",
    ]

    subject = f"Product Inquiry - {subject_text(submission.charger_type)} from {subject_text(submission.name)}"

    return ComposedEmail(
        subject=subject,
        html=wrap_document('New Product Inquiry', content),
        text='\n'.join(text_lines),
        reply_to=submission.email,
    )
