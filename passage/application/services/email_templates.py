"""Transactional email templates.

Each builder returns a rendered ``EmailMessage`` with subject, plain-text
and HTML bodies. Links are built by the calling flow.
"""

from html import escape

from passage.domain.protocols import EmailMessage

_HTML_LAYOUT = """\
<!doctype html>
<html lang="en">
  <body style="font-family: Arial, sans-serif; background: #f6f8fa; padding: 24px;">
    <div style="max-width: 480px; margin: 0 auto; background: #ffffff; padding: 32px; border-radius: 8px;">
      <h2 style="margin-top: 0;">{heading}</h2>
      <p>{intro}</p>
      <p style="text-align: center; margin: 32px 0;">
        <a href="{url}" style="background: #1d9bf0; color: #ffffff; padding: 12px 24px; border-radius: 999px; text-decoration: none;">{action}</a>
      </p>
      <p style="color: #536471; font-size: 13px;">{footer}</p>
    </div>
  </body>
</html>
"""


def _render_html(
    *, heading: str, intro: str, url: str, action: str, footer: str
) -> str:
    return _HTML_LAYOUT.format(
        heading=escape(heading),
        intro=escape(intro),
        url=escape(url, quote=True),
        action=escape(action),
        footer=escape(footer),
    )


def verify_email_message(*, to: str, url: str, app_name: str) -> EmailMessage:
    """Email verification message sent after signup.

    Args:
        to: Recipient address.
        url: Verification link.
        app_name: Product name shown in the copy.
    """
    intro = (
        f"Thanks for signing up for {app_name}. "
        "Confirm your email address to finish setting up your account."
    )
    footer = "If you did not create this account, you can ignore this email."
    return EmailMessage(
        to=to,
        subject="Verify your email address",
        text=f"{intro}\n\n{url}\n\n{footer}",
        html=_render_html(
            heading="Verify your email address",
            intro=intro,
            url=url,
            action="Verify email",
            footer=footer,
        ),
    )


def password_reset_message(
    *, to: str, url: str, app_name: str, ttl_minutes: int = 60
) -> EmailMessage:
    """Password reset message sent by forgot-password.

    Args:
        to: Recipient address.
        url: Reset link (carries the code and its expiry).
        app_name: Product name shown in the copy.
        ttl_minutes: Link lifetime quoted in the copy.
    """
    intro = (
        f"We received a request to reset your {app_name} password. "
        f"The link below expires in {ttl_minutes} minutes."
    )
    footer = "If you did not request a password reset, you can ignore this email."
    return EmailMessage(
        to=to,
        subject="Password reset request",
        text=f"{intro}\n\n{url}\n\n{footer}",
        html=_render_html(
            heading="Reset your password",
            intro=intro,
            url=url,
            action="Reset password",
            footer=footer,
        ),
    )
