from .common import timestamps


def normalize_contact_submission(submission):
    return {
        "id": submission.id,
        "name": submission.name,
        "email": submission.email,
        "subject": submission.subject,
        "message": submission.message,
        "status": submission.status,
        **timestamps(submission),
    }
