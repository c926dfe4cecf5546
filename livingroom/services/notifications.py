# livingroom/services/notifications.py
import logging
import re
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

import requests

from livingroom.core.config import settings

logger = logging.getLogger(__name__)

RESEND_URL = "https://api.resend.com/emails"
IST = timezone(timedelta(hours=5, minutes=30))


def now_ist_text() -> str:
    return datetime.now(IST).strftime("%d %b %Y, %I:%M %p")


# --- SENDING ---
def send_email(subject: str, html: str, to: str = None) -> bool:
    """Best effort. Returns False instead of raising so callers can carry on."""
    if not settings.RESEND_API_KEY:
        logger.warning("RESEND_API_KEY not set, skipping email '%s'", subject)
        return False
    try:
        headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}", "Content-Type": "application/json"}
        payload = {"from": settings.EMAIL_FROM, "to": [to or settings.CAFE_EMAIL], "subject": subject, "html": html}
        resp = requests.post(RESEND_URL, json=payload, headers=headers, timeout=5.0)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Email failed (%s): %s", subject, e)
        return False
    logger.info("Email sent: %s", subject)
    return True


def whatsapp_url(phone: str, message: str) -> str:
    digits = re.sub(r"[^0-9]", "", phone or "")
    return f"https://wa.me/{digits}?text={quote(message, safe='')}"


def format_rupees(amount) -> str:
    amount = float(amount or 0)
    return f"₹{int(amount)}" if amount.is_integer() else f"₹{amount:.2f}"


def payment_label(is_cod: bool) -> str:
    return "💵 Cash on Delivery" if is_cod else "💳 Online Payment"


def group_lines(lines):
    """Merges cart lines with the same name and price for display."""
    grouped = []
    for line in lines:
        for g in grouped:
            if g["name"] == line.name and g["price"] == line.price:
                g["quantity"] += line.quantity
                break
        else:
            grouped.append({"name": line.name, "price": line.price, "quantity": line.quantity})
    return grouped


# --- ORDER MESSAGES ---
def order_whatsapp_message(order, lines, is_cod: bool) -> str:
    items = "\n\n".join(
        f"  {i}. *{g['name']}*\n     {g['quantity']} × {format_rupees(g['price'])} = *{format_rupees(g['price'] * g['quantity'])}*"
        for i, g in enumerate(group_lines(lines), start=1)
    )
    parts = [
        "🍽️ *THE LIVING ROOM CAFE*",
        "*NEW ORDER ALERT*",
        "",
        f"📋 *ORDER NO:* #{order.order_number}",
        "",
        "👤 *CUSTOMER INFO*",
        f"  • Name: *{order.customer_name}*",
        f"  • Phone: {order.customer_phone}",
        f"  • Address: {order.customer_address}",
    ]
    if order.special_notes:
        parts.append(f"  • Note: _{order.special_notes}_")
    parts += [
        "",
        "🛒 *ORDER DETAILS*",
        items,
        "",
        "💰 *PAYMENT BREAKDOWN*",
        f"  Subtotal    :  {format_rupees(order.subtotal)}",
        f"  GST (5%)    :  {format_rupees(order.gst_amount)}",
        f"  *TOTAL      :  {format_rupees(order.total_amount)}*",
        "",
        f"  Method: *{payment_label(is_cod)}*",
    ]
    if order.transaction_id:
        parts.append(f"  Txn ID: `{order.transaction_id}`")
    parts += [
        "",
        f"🕐 {now_ist_text()}",
        "",
        "🔗 *Track Order:*",
        f"{settings.PUBLIC_BASE_URL}/track-order?orderNumber={order.order_number}",
        "",
        "✅ *Please confirm this order!*",
    ]
    return "\n".join(parts)


def order_email_html(order, lines, is_cod: bool) -> str:
    rows = "".join(
        f"<tr><td><strong>{i}. {g['name']}</strong><br>Qty: {g['quantity']} × {format_rupees(g['price'])}</td>"
        f"<td style=\"text-align: right;\"><strong>{format_rupees(g['price'] * g['quantity'])}</strong></td></tr>"
        for i, g in enumerate(group_lines(lines), start=1)
    )
    notes = f"<p><strong>Notes:</strong> {order.special_notes}</p>" if order.special_notes else ""
    txn = f"<p>Transaction ID: {order.transaction_id}</p>" if order.transaction_id else ""
    return f"""<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif;">
  <h1>🍽️ New Order!</h1>
  <h2>Order #{order.order_number}</h2>
  <h3>👤 Customer</h3>
  <p><strong>Name:</strong> {order.customer_name}</p>
  <p><strong>Phone:</strong> {order.customer_phone}</p>
  <p><strong>Address:</strong> {order.customer_address}</p>
  {notes}
  <h3>🛒 Items</h3>
  <table width="100%">{rows}</table>
  <h3>💰 Bill</h3>
  <p>Subtotal: <strong>{format_rupees(order.subtotal)}</strong></p>
  <p>GST (5%): <strong>{format_rupees(order.gst_amount)}</strong></p>
  <p>Total: <strong>{format_rupees(order.total_amount)}</strong></p>
  <p>{payment_label(is_cod)}</p>
  {txn}
  <p>⏰ {now_ist_text()}</p>
</body>
</html>"""


def notify_new_order(order, lines, is_cod: bool):
    """Emails the cafe and returns (whatsapp_url, email_sent)."""
    email_sent = send_email(f"🍽️ New Order - {order.order_number}", order_email_html(order, lines, is_cod))
    link = whatsapp_url(settings.CAFE_PHONE, order_whatsapp_message(order, lines, is_cod))
    return link, email_sent


# --- CATERING MESSAGES ---
def catering_whatsapp_message(inquiry) -> str:
    return f"""New Catering Inquiry - The Living Room Cafe

Inquiry Number: {inquiry.inquiry_number}

Customer Details:
Name: {inquiry.customer_name}
Phone: {inquiry.customer_phone}
Email: {inquiry.customer_email or 'Not provided'}

Event Details:
Type: {(inquiry.event_type or 'other').upper()}
Date: {inquiry.event_date}
Guests: {inquiry.guest_count or 'Not specified'}
Venue: {inquiry.venue or 'To be decided'}
Budget: {inquiry.budget or 'Not specified'}

Special Requirements:
{inquiry.requirements or 'None'}

---
This inquiry was submitted via website on {now_ist_text()}
Please contact the customer as soon as possible."""


def catering_email_html(inquiry) -> str:
    requirements = ""
    if inquiry.requirements:
        requirements = f"<h3>Special Requirements</h3><p>{inquiry.requirements}</p>"
    return f"""<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif;">
  <h1>New Catering Inquiry!</h1>
  <h2>Inquiry #: {inquiry.inquiry_number}</h2>
  <h3>Customer Details</h3>
  <p><strong>Name:</strong> {inquiry.customer_name}</p>
  <p><strong>Phone:</strong> {inquiry.customer_phone}</p>
  <p><strong>Email:</strong> {inquiry.customer_email or 'Not provided'}</p>
  <h3>Event Details</h3>
  <p><strong>Event Type:</strong> {(inquiry.event_type or 'other').upper()}</p>
  <p><strong>Event Date:</strong> {inquiry.event_date}</p>
  <p><strong>Expected Guests:</strong> {inquiry.guest_count or 'Not specified'}</p>
  <p><strong>Venue:</strong> {inquiry.venue or 'To be decided'}</p>
  <p><strong>Budget:</strong> {inquiry.budget or 'Not specified'}</p>
  {requirements}
  <p>
    <a href="tel:{inquiry.customer_phone}">Call Customer</a> |
    <a href="https://wa.me/91{inquiry.customer_phone}">WhatsApp Customer</a>
  </p>
  <p>Status: PENDING. Received at {now_ist_text()}</p>
</body>
</html>"""


def notify_catering_inquiry(inquiry):
    email_sent = send_email(f"New Catering Inquiry - {inquiry.inquiry_number}", catering_email_html(inquiry))
    link = whatsapp_url(settings.CAFE_PHONE, catering_whatsapp_message(inquiry))
    return link, email_sent
