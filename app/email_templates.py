"""
MJML Email Templates
All email templates using MJML for responsive, cross-client compatibility
"""

from html import escape
from typing import Optional

# Brand colors - Rose/Gold wedding palette
THEME = {
    "primary": "#e11d48",
    "primary_dark": "#be123c",
    "primary_light": "#ffe4e6",
    "accent": "#d4a373",
    "background": "#fdf8f6",
    "card_bg": "#ffffff",
    "text_primary": "#1f2937",
    "text_secondary": "#374151",
    "text_muted": "#6b7280",
    "border": "#f3e8e2",
    "success": "#059669",
    "danger": "#dc2626",
}

BRAND_NAME = "Dream Weddings"


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    cta_url: Optional[str] = None,
    cta_label: Optional[str] = None,
    is_user_email: bool = False,
) -> str:
    """Base MJML template wrapper for all emails"""

    cta_section = ""
    if cta_url and cta_label:
        cta_section = f"""
        <mj-section padding="20px 0">
          <mj-column>
            <mj-button
              href="{cta_url}"
              background-color="{THEME['primary']}"
              color="#ffffff"
              font-weight="600"
              border-radius="8px"
              padding="18px 40px"
              font-size="16px">
              {cta_label}
            </mj-button>
          </mj-column>
        </mj-section>
        """

    footer_notice = ""
    if is_user_email:
        footer_notice = f"""
        <mj-text align="center" font-size="12px" color="#9ca3af" padding="12px 0 0 0">
          You're receiving this because you have an account with {BRAND_NAME}.
        </mj-text>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="Georgia, 'Times New Roman', serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <mj-section background-color="#ffffff" padding="32px 20px 8px 20px">
          <mj-column>
            <mj-text align="center" font-size="26px" color="{THEME['primary']}" font-style="italic">
              {BRAND_NAME}
            </mj-text>
            <mj-divider border-color="{THEME['border']}" border-width="1px" padding="16px 0 0 0" />
          </mj-column>
        </mj-section>

        <mj-section background-color="#ffffff" padding="16px 40px 40px 40px">
          <mj-column>
            <mj-text font-size="22px" font-weight="600" color="{THEME['text_primary']}" line-height="1.3" padding="0 0 16px 0">
              {title}
            </mj-text>
            {content_sections}
          </mj-column>
        </mj-section>

        {cta_section}

        <mj-section padding="32px 20px">
          <mj-column>
            <mj-text align="center" font-size="13px" color="#9ca3af" padding="0">
              © {BRAND_NAME}. All rights reserved.
            </mj-text>
            {footer_notice}
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def welcome_email_template(user_name: str) -> str:
    content = f"""
    <mj-text>Hi {escape(user_name)},</mj-text>
    <mj-text>
      Welcome to {BRAND_NAME}! Browse trusted vendors, save your favourites and keep
      your whole wedding plan in one place.
    </mj-text>
    """
    return get_base_template(
        title=f"Welcome to {BRAND_NAME}",
        preview_text="Your account is ready",
        content_sections=content,
        is_user_email=True,
    )


def email_verification_template(user_name: str, verify_link: str) -> str:
    content = f"""
    <mj-text>Hi {escape(user_name)},</mj-text>
    <mj-text>Please confirm your email address to finish setting up your account.</mj-text>
    <mj-text color="{THEME['text_muted']}" font-size="14px">
      If you didn't create an account, you can ignore this email.
    </mj-text>
    """
    return get_base_template(
        title="Verify your email",
        preview_text="Confirm your email address",
        content_sections=content,
        cta_url=verify_link,
        cta_label="Verify Email",
        is_user_email=True,
    )


def password_reset_template(reset_link: str) -> str:
    content = f"""
    <mj-text>We received a request to reset your password.</mj-text>
    <mj-text color="{THEME['text_muted']}" font-size="14px">
      This link expires in one hour. If you didn't ask for a reset, no action is needed.
    </mj-text>
    """
    return get_base_template(
        title="Reset your password",
        preview_text="Password reset requested",
        content_sections=content,
        cta_url=reset_link,
        cta_label="Reset Password",
        is_user_email=True,
    )


def vendor_approval_template(
    vendor_name: str, status: str, dashboard_url: str, rejection_reason: Optional[str] = None
) -> str:
    """Approval or rejection decision for a vendor application"""
    if status == "approved":
        content = f"""
        <mj-text>Congratulations {escape(vendor_name)}!</mj-text>
        <mj-text>
          Your vendor profile has been approved and is now visible to couples on {BRAND_NAME}.
        </mj-text>
        """
        return get_base_template(
            title="Your vendor profile is live",
            preview_text="Your application was approved",
            content_sections=content,
            cta_url=dashboard_url,
            cta_label="Open Dashboard",
            is_user_email=True,
        )

    reason = escape(rejection_reason) if rejection_reason else "No reason was provided."
    content = f"""
    <mj-text>Hi {escape(vendor_name)},</mj-text>
    <mj-text>
      Unfortunately your vendor application was not approved at this time.
    </mj-text>
    <mj-text padding="16px" container-background-color="{THEME['primary_light']}">
      <strong>Reason:</strong> {reason}
    </mj-text>
    <mj-text>You can update your profile and contact our team to apply again.</mj-text>
    """
    return get_base_template(
        title="Update on your vendor application",
        preview_text="Your application was reviewed",
        content_sections=content,
        is_user_email=True,
    )


def new_vendor_notification_template(vendor_name: str, vendor_email: str, review_url: str) -> str:
    """Notify the admin mailbox that a vendor is waiting for approval"""
    content = f"""
    <mj-text>A new vendor has registered and is waiting for review.</mj-text>
    <mj-table>
      <tr><td style="padding:4px 0;color:{THEME['text_muted']}">Business</td><td>{escape(vendor_name)}</td></tr>
      <tr><td style="padding:4px 0;color:{THEME['text_muted']}">Email</td><td>{escape(vendor_email or '-')}</td></tr>
    </mj-table>
    """
    return get_base_template(
        title=f"New Vendor Application - {escape(vendor_name)}",
        preview_text="A vendor is waiting for approval",
        content_sections=content,
        cta_url=review_url,
        cta_label="Review Application",
    )
