import logging
import smtplib
from datetime import datetime, timezone
from email.message import EmailMessage

from flask import current_app, render_template

logger = logging.getLogger(__name__)


class Mailer:
    """Thin SMTP client configured from ``MAIL_*`` settings."""

    def __init__(self, config):
        self.host = config.get("MAIL_HOST")
        self.port = config.get("MAIL_PORT", 465)
        self.username = config.get("MAIL_USERNAME")
        self.password = config.get("MAIL_PASSWORD")
        self.sender = config.get("MAIL_FROM") or self.username
        self.timeout = config.get("MAIL_TIMEOUT", 60)
        self.suppress = config.get("MAIL_SUPPRESS_SEND", False)

    @classmethod
    def from_app(cls):
        return cls(current_app.config)

    def build_message(self, to, subject, html):
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content("This message requires an HTML capable mail client.")
        message.add_alternative(html, subtype="html")
        return message

    def send(self, to, subject, template, **context):
        if not to:
            raise ValueError("Recipient address is required")

        html = render_template(f"email/{template}", **context)
        message = self.build_message(to, subject, html)

        if self.suppress:
            logger.info("Mail suppressed: %s -> %s", subject, to)
            return message

        if not self.host:
            raise RuntimeError("MAIL_HOST is not configured")

        if self.port == 465:
            smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        with smtp:
            if self.port != 465:
                smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(message)

        logger.info("Mail sent: %s -> %s", subject, to)
        return message


def _dispatch(mails):
    """
    Send each ``(to, subject, template, context)`` tuple.

    Failures are logged and never propagate to the request that
    triggered the notification.
    """
    mailer = Mailer.from_app()
    sent = 0

    for to, subject, template, context in mails:
        try:
            mailer.send(to, subject, template, **context)
            sent += 1
        except Exception:
            logger.exception("Failed to send '%s' to %s", subject, to)

    return sent


def _common_context():
    config = current_app.config
    return {
        "brand": config.get("BRAND_NAME"),
        "support_email": config.get("SUPPORT_EMAIL"),
        "date": datetime.now(timezone.utc).strftime("%d %b %Y"),
    }


def send_contact_submission_emails(submission):
    context = dict(_common_context(), submission=submission)
    return _dispatch([
        (
            current_app.config.get("ADMIN_EMAIL"),
            f"New Contact Form Submission: {submission.subject}",
            "contact_admin.html",
            context,
        ),
        (
            submission.email,
            "Thank you for contacting us",
            "contact_auto_reply.html",
            context,
        ),
    ])


def send_product_request_emails(product_request):
    context = dict(_common_context(), request=product_request)
    return _dispatch([
        (
            current_app.config.get("CONSIGN_EMAIL"),
            f"New Product Request: {product_request.name}",
            "product_request_admin.html",
            context,
        ),
        (
            product_request.contact_email,
            f"Product Request Confirmation - {context['brand']}",
            "product_request_confirmation.html",
            context,
        ),
    ])


def send_quote_request_emails(quote_request, product):
    context = dict(_common_context(), quote=quote_request, product=product)
    return _dispatch([
        (
            current_app.config.get("CONSIGN_EMAIL"),
            f"New Quote Request: {quote_request.reference_number}",
            "quote_request_admin.html",
            context,
        ),
        (
            quote_request.email,
            f"Your Quote Request: {quote_request.reference_number}",
            "quote_request_confirmation.html",
            context,
        ),
    ])
