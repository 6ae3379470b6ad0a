from typing import Any, Dict, List
from storefront.errors import NotFoundError, ValidationError
from storefront.extensions import db
from storefront.models.contact_submission import ContactSubmission
from storefront.services.email import send_contact_submission_emails
from storefront.utils.transaction import transactional

REQUIRED_FIELDS = ("name", "email", "subject", "message")


def create_submission(*, data: Dict[str, Any]) -> ContactSubmission:
    """
    Persist a storefront contact form, then notify the admin inbox and
    send the auto-reply. Mail failures do not fail the submission.
    """
    missing = [field for field in REQUIRED_FIELDS if not str(data.get(field) or "").strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    not_text = [field for field in REQUIRED_FIELDS if not isinstance(data[field], str)]
    if not_text:
        raise ValidationError(f"Fields must be text: {', '.join(not_text)}")

    submission = ContactSubmission(
        name=data["name"].strip(),
        email=data["email"].strip(),
        subject=data["subject"].strip(),
        message=data["message"].strip(),
    )

    with transactional():
        db.session.add(submission)

    send_contact_submission_emails(submission)
    return submission


def list_submissions() -> List[ContactSubmission]:
    return ContactSubmission.query.order_by(ContactSubmission.created_at.desc()).all()


def update_submission_status(*, submission_id: str, status: str) -> ContactSubmission:
    submission = db.session.get(ContactSubmission, submission_id)
    if not submission:
        raise NotFoundError("Submission not found")

    with transactional():
        submission.status = status

    return submission
