import logging
from datetime import datetime, timezone
from typing import Optional

import requests

from config import (
    CONTACT_TO_EMAIL,
    EMAILJS_PRIVATE_KEY,
    EMAILJS_PUBLIC_KEY,
    EMAILJS_SERVICE_ID,
    EMAILJS_TEMPLATE_ID,
    HTTP_TIMEOUT,
)
from schemas import ContactMessage

logger = logging.getLogger(__name__)

SEND_URL = "https://api.emailjs.com/api/v1.0/email/send"


class RelayError(RuntimeError):
    pass


def build_template_params(message: ContactMessage, sent_at: Optional[datetime] = None) -> dict:
    sent_at = sent_at or datetime.now(timezone.utc)
    return {
        "from_name": message.name,
        "from_email": message.email,
        "message": message.message,
        "time": sent_at.strftime("%Y-%m-%d %H:%M:%S %Z"),
        "to_email": CONTACT_TO_EMAIL,
    }


def send_contact_message(message: ContactMessage) -> None:
    """Forward a contact form submission through EmailJS. One attempt, no retry."""
    if not (EMAILJS_SERVICE_ID and EMAILJS_TEMPLATE_ID and EMAILJS_PUBLIC_KEY):
        raise RelayError("Email relay is not configured")

    payload = {
        "service_id": EMAILJS_SERVICE_ID,
        "template_id": EMAILJS_TEMPLATE_ID,
        "user_id": EMAILJS_PUBLIC_KEY,
        "template_params": build_template_params(message),
    }
    if EMAILJS_PRIVATE_KEY:
        payload["accessToken"] = EMAILJS_PRIVATE_KEY

    try:
        resp = requests.post(SEND_URL, json=payload, timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise RelayError(str(e)) from e

    if resp.status_code != 200:
        raise RelayError(f"EmailJS returned {resp.status_code}: {resp.text}")
    logger.info("Contact message from %s relayed", message.email)
