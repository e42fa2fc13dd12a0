from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound, select_autoescape

from salon_booking.application.ports.email_renderer import EmailRendererPort, RenderedEmail

TEMPLATES: dict[str, str] = {
    "booking_confirmation.subject": "Booking Confirmed - {{ salon_name }}",
    "booking_confirmation.html": """\
<html>
  <body>
    <h2>Hi {{ customer_name }},</h2>
    <p>Your booking at <strong>{{ salon_name }}</strong> is received.</p>
    <table>
      <tr><td>Services</td><td>{{ service_name }}</td></tr>
      <tr><td>Start time</td><td>{{ start_time }}</td></tr>
      <tr><td>Total</td><td>{{ currency }}{{ total_price }}</td></tr>
      <tr><td>Booking ID</td><td>{{ booking_id }}</td></tr>
    </table>
    <p>See you soon!</p>
  </body>
</html>
""",
    "booking_confirmation.txt": """\
Hi {{ customer_name }},

Your booking at {{ salon_name }} is received.

Services: {{ service_name }}
Start time: {{ start_time }}
Total: {{ currency }}{{ total_price }}
Booking ID: {{ booking_id }}

See you soon!
""",
    "payment_receipt.subject": "Payment Receipt - {{ currency }}{{ amount }}",
    "payment_receipt.html": """\
<html>
  <body>
    <h2>Hi {{ customer_name }},</h2>
    <p>We received your payment of <strong>{{ currency }}{{ amount }}</strong>.</p>
    <table>
      <tr><td>Transaction ID</td><td>{{ transaction_id }}</td></tr>
      <tr><td>Payment ID</td><td>{{ payment_id }}</td></tr>
      <tr><td>Booking ID</td><td>{{ booking_id }}</td></tr>
    </table>
  </body>
</html>
""",
    "payment_receipt.txt": """\
Hi {{ customer_name }},

We received your payment of {{ currency }}{{ amount }}.

Transaction ID: {{ transaction_id }}
Payment ID: {{ payment_id }}
Booking ID: {{ booking_id }}
""",
}


class JinjaEmailRenderer(EmailRendererPort):
    def __init__(self, templates: dict[str, str] | None = None) -> None:
        loader = DictLoader(templates or TEMPLATES)
        self._html_env = Environment(
            loader=loader,
            autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=True),
            undefined=StrictUndefined,
        )
        self._text_env = Environment(loader=loader, autoescape=False, undefined=StrictUndefined)

    def render(self, template: str, context: dict[str, Any]) -> RenderedEmail:
        try:
            subject = self._text_env.get_template(f"{template}.subject").render(context)
            html = self._html_env.get_template(f"{template}.html").render(context)
            text = self._text_env.get_template(f"{template}.txt").render(context)
        except TemplateNotFound as e:
            raise ValueError(f"Unknown email template: {template}") from e
        return RenderedEmail(subject=subject.strip(), html=html, text=text)
