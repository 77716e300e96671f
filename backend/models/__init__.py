from .submission import ContactSubmission, InquirySubmission

__all__ = [
    'ContactSubmission',
    'InquirySubmission',
]
