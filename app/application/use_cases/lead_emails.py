"""Transactional email templates for lead submissions."""

from datetime import datetime
from html import escape

from app.application.dtos.email import OutboundEmail
from app.application.dtos.lead import LeadSubmission

ACKNOWLEDGMENT_SUBJECT = "Thank you for your inquiry"

NEXT_STEPS = (
    "Our team reviews your vision and requirements",
    "We'll reach out within 24 hours for an initial consultation",
    "Together, we'll determine if we're the right fit for your brand",
)

_PANEL_STYLE = "background: #f8f8f8; padding: 20px; border-radius: 8px;"


def admin_notification(
    submission: LeadSubmission,
    sender: str,
    admin_email: str,
    submitted_at: datetime,
) -> OutboundEmail:
    """
    Build the internal notification sent to the studio inbox.

    Args:
        submission: Validated submission
        sender: From address
        admin_email: Studio inbox address
        submitted_at: Submission timestamp shown in the body

    Returns:
        Email ready to send
    """
    name = escape(submission.name)
    email = escape(submission.email)
    html = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #4a0000;">New Lead Submission</h2>
        <p>You have a new inquiry from your website!</p>

        <div style="{_PANEL_STYLE} margin: 20px 0;">
          <h3 style="margin-top: 0;">Contact Details</h3>
          <p><strong>Name:</strong> {name}</p>
          <p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
          <p><strong>Phone:</strong> {escape(submission.phone)}</p>
          <p><strong>Business Name:</strong> {escape(submission.business_name)}</p>
          <p><strong>Submitted:</strong> {submitted_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()}</p>
        </div>

        <div style="{_PANEL_STYLE} margin: 20px 0;">
          <h3 style="margin-top: 0;">Message</h3>
          <p style="white-space: pre-wrap;">{escape(submission.message)}</p>
        </div>

        <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #ddd;">
          <p style="color: #666; font-size: 12px;">View in Supabase Dashboard</p>
        </div>
      </div>
    """
    return OutboundEmail(
        sender=sender,
        recipient=admin_email,
        subject=f"New Lead: {submission.name} ({submission.business_name})",
        html=html,
    )


def client_acknowledgment(submission: LeadSubmission, sender: str) -> OutboundEmail:
    """
    Build the confirmation sent back to the person who submitted the form.

    Args:
        submission: Validated submission
        sender: From address

    Returns:
        Email ready to send
    """
    steps = "\n".join(f"            <li>{step}</li>" for step in NEXT_STEPS)
    html = f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #4a0000;">Inquiry Received</h2>
        <p>Hi {escape(submission.name)},</p>

        <p>Thank you for reaching out to FORM Creative Growth Studio regarding <strong>{escape(submission.business_name)}</strong>.</p>

        <p>We've received your inquiry and our team will review the details. We typically respond within 24 hours to the phone number ({escape(submission.phone)}) or email provided to discuss how we can help elevate your brand.</p>

        <div style="{_PANEL_STYLE} margin: 30px 0;">
          <h3 style="margin-top: 0;">What happens next?</h3>
          <ol style="line-height: 1.8;">
{steps}
          </ol>
        </div>

        <p>In the meantime, feel free to explore our work and philosophy on our website.</p>

        <p style="margin-top: 30px;">
          <strong>The FORM Team</strong><br>
          <span style="font-style: italic; color: #666;">Aesthetic Precision &amp; Strategic Prescience</span>
        </p>

        <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #ddd;">
          <p style="color: #999; font-size: 11px;">
            This is an automated response confirming receipt of your inquiry.<br>
            If you have urgent questions, please reply to this email.
          </p>
        </div>
      </div>
    """
    return OutboundEmail(
        sender=sender,
        recipient=submission.email,
        subject=ACKNOWLEDGMENT_SUBJECT,
        html=html,
    )
