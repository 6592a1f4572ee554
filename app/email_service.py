"""
Email Service using Resend
Compiles MJML templates to HTML and sends transactional emails
"""

import logging
from typing import Optional, Union

import resend
from mjml import mjml_to_html

from .config import (
    ADMIN_NOTIFICATION_EMAIL,
    ADMIN_PANEL_URL,
    EMAIL_FROM_ADDRESS,
    FRONTEND_URL,
    RESEND_API_KEY,
)
from .email_templates import (
    BRAND_NAME,
    email_verification_template,
    new_vendor_notification_template,
    password_reset_template,
    vendor_approval_template,
    welcome_email_template,
)

logger = logging.getLogger(__name__)

resend.api_key = RESEND_API_KEY


class EmailDeliveryError(Exception):
    """Raised when an email could not be compiled or handed to Resend"""


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise EmailDeliveryError(f"Failed to compile MJML template: {e}") from e

    # mjml_to_html returns an object with html/errors; older versions return dicts
    errors = getattr(result, "errors", None) or (result.get("errors") if isinstance(result, dict) else None)
    if errors:
        logger.warning(f"MJML compilation warnings: {errors}")
    if isinstance(result, dict):
        return result.get("html", "")
    return getattr(result, "html", str(result))


async def send_email(
    to: Union[str, list[str]],
    subject: str,
    mjml_content: str,
    from_address: Optional[str] = None,
) -> Optional[dict]:
    """
    Send an email through Resend

    Returns the Resend response, or None when no API key is configured
    (development) so callers never depend on delivery.
    """
    recipients = [to] if isinstance(to, str) else to

    if not RESEND_API_KEY:
        logger.warning(f"⚠️ RESEND_API_KEY not configured - skipping email '{subject}' to {recipients}")
        return None

    html_content = compile_mjml_to_html(mjml_content)

    try:
        logger.info(f"📧 Sending email via Resend to: {recipients}")
        response = resend.Emails.send(
            {
                "from": from_address or EMAIL_FROM_ADDRESS,
                "to": recipients,
                "subject": subject,
                "html": html_content,
            }
        )
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise EmailDeliveryError(f"Failed to send email: {e}") from e

    logger.info(f"✅ Email sent successfully via Resend: {response}")
    return response


async def send_safely(send_func, *args, **kwargs):
    """
    Run one of the send_* helpers from a background task.

    Delivery failures are logged and swallowed so the request that queued the
    email is never affected.
    """
    try:
        return await send_func(*args, **kwargs)
    except EmailDeliveryError as e:
        logger.error(f"❌ Failed to run {send_func.__name__}: {e}")
        return None


# ============================================
# Pre-built Email Templates for Common Events
# ============================================


async def send_welcome_email(to: str, user_name: str):
    return await send_email(to, f"Welcome to {BRAND_NAME}", welcome_email_template(user_name))


async def send_verification_email(to: str, user_name: str, token: str):
    verify_link = f"{FRONTEND_URL}/verify-email?token={token}"
    return await send_email(
        to, f"Verify Your Email - {BRAND_NAME}", email_verification_template(user_name, verify_link)
    )


async def send_password_reset_email(to: str, token: str):
    reset_link = f"{FRONTEND_URL}/reset-password?token={token}"
    return await send_email(to, f"Reset Your Password - {BRAND_NAME}", password_reset_template(reset_link))


async def send_vendor_approval_email(
    to: str, vendor_name: str, status: str, rejection_reason: Optional[str] = None
):
    if status == "approved":
        subject = f"Your vendor profile has been approved - {BRAND_NAME}"
    else:
        subject = f"Update on your vendor application - {BRAND_NAME}"
    mjml_content = vendor_approval_template(
        vendor_name, status, f"{FRONTEND_URL}/vendor/dashboard", rejection_reason
    )
    return await send_email(to, subject, mjml_content)


async def send_new_vendor_notification(vendor_name: str, vendor_email: str, vendor_id: int):
    mjml_content = new_vendor_notification_template(
        vendor_name, vendor_email, f"{ADMIN_PANEL_URL}/vendors/{vendor_id}"
    )
    return await send_email(ADMIN_NOTIFICATION_EMAIL, f"New Vendor Application - {vendor_name}", mjml_content)
