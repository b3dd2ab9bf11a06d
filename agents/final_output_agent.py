# agents/final_output_agent.py
from __future__ import annotations
import html
import logging
import re
from datetime import datetime
from typing import List, Optional

from models.booking import BookableItem, BookingData
from models.flight import FlightOffer
from models.hotel import Hotel
from models.itinerary import Itinerary
from models.package import Package
from models.preferences import TripPreferences
from models.visa import VisaRequirement
from utils.config import AppConfig, get_config
from utils.money import format_inr

logger = logging.getLogger(__name__)

KIND_LABELS = {"flight": "Flight", "hotel": "Hotel", "package": "Package"}

_STYLE = """
    body { font-family: Arial, sans-serif; max-width: 800px; margin: 40px auto; padding: 20px; color: #333; }
    .header { text-align: center; margin-bottom: 40px; padding-bottom: 20px; border-bottom: 3px solid #7c3aed; }
    .logo { font-size: 32px; font-weight: bold; color: #7c3aed; margin-bottom: 10px; }
    .confirmed { color: #10b981; font-size: 24px; font-weight: bold; margin: 20px 0; }
    .booking-ref { color: #7c3aed; font-size: 28px; font-weight: bold; margin: 10px 0; }
    .section { margin: 30px 0; padding: 20px; background: #f9fafb; border-radius: 8px; }
    .section-title { font-size: 18px; font-weight: bold; color: #7c3aed; margin-bottom: 15px; }
    .detail-row { display: flex; justify-content: space-between; padding: 10px 0; border-bottom: 1px solid #e5e7eb; }
    .label { color: #6b7280; }
    .value { font-weight: 600; color: #111827; }
    .total { font-size: 20px; color: #10b981; }
    .footer { text-align: center; margin-top: 40px; padding-top: 20px; border-top: 2px solid #e5e7eb; color: #6b7280; font-size: 14px; }
"""


def _e(value: object) -> str:
    return html.escape(str(value if value is not None else ""), quote=True)


def _row(label: str, value: str, css: str = "value") -> str:
    return (
        '    <div class="detail-row">\n'
        f'      <span class="label">{_e(label)}</span>\n'
        f'      <span class="{css}">{_e(value)}</span>\n'
        "    </div>"
    )


class FinalOutputAgent:
    """
    Builds everything the user takes away from a booking or planner chat:
    the downloadable HTML confirmation, the flight e-ticket, the itinerary
    document and the markdown summary shown on the confirmation screen.
    All interpolated text is HTML-escaped.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or get_config()

    # ---- item labels ----

    def kind_label(self, kind: str, item: BookableItem) -> str:
        if isinstance(item, VisaRequirement):
            return "Visa"
        return KIND_LABELS.get(kind, "Package")

    def item_title(self, kind: str, item: BookableItem) -> str:
        if kind == "flight" and isinstance(item, FlightOffer):
            return item.route_label
        if kind == "hotel" and isinstance(item, Hotel):
            return item.name
        if isinstance(item, Package):
            return item.title
        return getattr(item, "title", None) or getattr(item, "name", "")

    def item_subtitle(self, kind: str, item: BookableItem) -> str:
        if kind == "flight" and isinstance(item, FlightOffer):
            return item.airline
        if kind == "hotel" and isinstance(item, Hotel):
            return item.location
        if isinstance(item, Package):
            return item.duration_label or item.destination or "Travel Package"
        if isinstance(item, VisaRequirement):
            return item.country
        return "Travel Package"

    # ---- downloads ----

    def confirmation_filename(self, booking_id: str) -> str:
        return f"Booking-Confirmation-{booking_id}.html"

    def itinerary_filename(self, destination: str) -> str:
        slug = re.sub(r"\s+", "-", (destination or "").strip())
        return f"{slug}-Itinerary-SuvidhaEscapes.html"

    def confirmation_html(self, booking: BookingData, now: Optional[datetime] = None) -> str:
        if not booking.booking_id:
            raise ValueError("confirmation_html needs a booking reference")
        cfg = self.config
        year = (now or datetime.now()).year
        fare = booking.fare
        guest = booking.guest
        kind_label = self.kind_label(booking.kind, booking.item)

        parts: List[str] = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="UTF-8">',
            f"  <title>Booking Confirmation - {_e(booking.booking_id)}</title>",
            f"  <style>{_STYLE}  </style>",
            "</head>",
            "<body>",
            '  <div class="header">',
            f'    <div class="logo">{_e(cfg.brand_name)}</div>',
            f"    <div>{_e(cfg.brand_tagline)}</div>",
            "  </div>",
            '  <div class="confirmed">✓ Booking Confirmed!</div>',
            '  <div style="text-align: center; margin: 30px 0;">',
            '    <div style="color: #6b7280; font-size: 14px;">Booking Reference</div>',
            f'    <div class="booking-ref">{_e(booking.booking_id)}</div>',
            "  </div>",
            '  <div class="section">',
            '    <div class="section-title">Booking Details</div>',
            _row(kind_label, self.item_title(booking.kind, booking.item)),
            _row("Details", self.item_subtitle(booking.kind, booking.item)),
            "  </div>",
            '  <div class="section">',
            '    <div class="section-title">Guest Information</div>',
            _row("Name", f"{guest.first_name} {guest.last_name}"),
            _row("Email", guest.email),
            _row("Phone", guest.phone),
            _row("Address", guest.full_address),
        ]
        if guest.special_requests:
            parts.append(_row("Special Requests", guest.special_requests))
        parts += [
            "  </div>",
            '  <div class="section">',
            '    <div class="section-title">Payment Summary</div>',
            _row(fare.label, format_inr(fare.base_fare)),
            _row("Taxes & Fees", format_inr(fare.taxes)),
            _row("Total Amount Paid", format_inr(fare.total), css="value total"),
            "  </div>",
            '  <div class="contact" style="text-align: center;">',
            '    <div class="section-title">Need Assistance?</div>',
            f"    <p>📧 Email: {_e(cfg.support_email)}</p>",
            f"    <p>📞 Phone: {_e(cfg.support_phone)}</p>",
            "    <p>🕐 Available: 24/7</p>",
            "  </div>",
            '  <div class="footer">',
            f"    <p><strong>{_e(cfg.brand_name)}</strong></p>",
            "    <p>Making your travel dreams come true</p>",
            f"    <p>© {year} {_e(cfg.brand_name)}. All rights reserved.</p>",
            "  </div>",
            "</body>",
            "</html>",
        ]
        logger.info("confirmation document built for %s", booking.booking_id)
        return "\n".join(parts)

    def ticket_html(self, booking: BookingData) -> str:
        """E-ticket for flight bookings: legs, passengers and baggage allowance."""
        if booking.kind != "flight" or not isinstance(booking.item, FlightOffer):
            raise ValueError("ticket_html is only available for flight bookings")
        flight = booking.item
        cfg = self.config

        legs = []
        for seg in flight.segments:
            legs.append(
                "    <tr>"
                f"<td>{_e(seg.flight_number)}</td>"
                f"<td>{_e(seg.origin)}</td>"
                f"<td>{_e(seg.departure.strftime('%d %b %Y %H:%M'))}</td>"
                f"<td>{_e(seg.destination)}</td>"
                f"<td>{_e(seg.arrival.strftime('%d %b %Y %H:%M'))}</td>"
                f"<td>{_e(seg.cabin)}</td>"
                "</tr>"
            )
        if booking.travelers:
            passengers = [f"    <li>{_e(t.display_name)}</li>" for t in booking.travelers]
        else:
            passengers = [f"    <li>{_e(booking.guest.full_name)}</li>"]

        parts = [
            "<!DOCTYPE html>",
            "<html>",
            '<head><meta charset="UTF-8">',
            f"  <title>E-Ticket - {_e(booking.booking_id)}</title>",
            f"  <style>{_STYLE}  </style>",
            "</head>",
            "<body>",
            f'  <div class="header"><div class="logo">{_e(cfg.brand_name)}</div><div>E-Ticket</div></div>',
            f'  <div class="booking-ref">PNR / Booking Reference: {_e(booking.booking_id)}</div>',
            '  <div class="section">',
            f'    <div class="section-title">{_e(flight.airline)} {_e(flight.flight_number)}</div>',
            "    <table>",
            "    <tr><th>Flight</th><th>From</th><th>Departs</th><th>To</th><th>Arrives</th><th>Cabin</th></tr>",
            *legs,
            "    </table>",
            "  </div>",
            '  <div class="section">',
            '    <div class="section-title">Passengers</div>',
            "    <ul>",
            *passengers,
            "    </ul>",
            "  </div>",
            '  <div class="section">',
            '    <div class="section-title">Baggage</div>',
            _row("Cabin", flight.baggage_cabin or "-"),
            _row("Check-in", flight.baggage_checked or "-"),
            _row("Refundable", "Yes" if flight.refundable else "No"),
            "  </div>",
            f'  <div class="footer"><p>{_e(cfg.support_email)} | {_e(cfg.support_phone)}</p></div>',
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)

    def itinerary_html(self, prefs: TripPreferences, itinerary: Itinerary, now: Optional[datetime] = None) -> str:
        cfg = self.config
        generated = (now or datetime.now()).strftime("%B %d, %Y")
        days: List[str] = []
        for day in itinerary.days:
            days.append('  <div class="section">')
            days.append(f'    <div class="section-title">Day {day.day}: {_e(day.title)}</div>')
            for a in day.activities:
                days.append('    <div class="activity">')
                days.append(f"      <div>🕐 {_e(a.time)}</div>")
                days.append(f"      <strong>{_e(a.title)}</strong>")
                days.append(f"      <p>{_e(a.description)}</p>")
                days.append(f"      <div>Duration: {_e(a.duration)}</div>")
                days.append("    </div>")
            days.append("  </div>")

        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="UTF-8">',
            f"  <title>{_e(prefs.destination)} Itinerary - {_e(cfg.brand_name)}</title>",
            f"  <style>{_STYLE}  </style>",
            "</head>",
            "<body>",
            '  <div class="header">',
            f'    <div class="logo">✈️ {_e(cfg.brand_name.upper())}</div>',
            "    <div>Your Personalized Travel Itinerary</div>",
            f"    <div>{_e(prefs.destination)} • {_e(prefs.duration)}</div>",
            "  </div>",
            '  <div class="section">',
            _row("📍 Destination", prefs.destination or ""),
            _row("⏱️ Duration", prefs.duration or ""),
            _row("💰 Budget", prefs.budget or ""),
            _row("👥 Travelers", prefs.travelers or ""),
            _row("❤️ Interests", ", ".join(prefs.interests)),
            "  </div>",
            *days,
            '  <div class="footer">',
            f"    <p>Thank you for choosing {_e(cfg.brand_name)}!</p>",
            f"    <p>Generated on {_e(generated)}</p>",
            f"    <p>📧 {_e(cfg.support_email)} | 📞 {_e(cfg.support_phone)}</p>",
            "  </div>",
            "</body>",
            "</html>",
        ]
        logger.info("itinerary document built for %s (%d days)", prefs.destination, len(itinerary.days))
        return "\n".join(parts)

    # ---- on-screen summary ----

    def summary_markdown(self, booking: BookingData) -> str:
        fare = booking.fare
        lines: List[str] = []
        lines.append("✅ Booking Confirmed!")
        lines.append("")
        lines.append(f"**Booking Reference:** `{booking.booking_id}`")
        lines.append("")
        lines.append("### Booking Details")
        lines.append(f"- **{self.kind_label(booking.kind, booking.item)}:** {self.item_title(booking.kind, booking.item)}")
        lines.append(f"- **Details:** {self.item_subtitle(booking.kind, booking.item)}")
        lines.append("")
        lines.append("### Guest")
        lines.append(f"- {booking.guest.full_name} | {booking.guest.email} | {booking.guest.phone}")
        lines.append("")
        lines.append("### Payment")
        lines.append(f"- {fare.label}: {format_inr(fare.base_fare)}")
        lines.append(f"- Taxes & Fees: {format_inr(fare.taxes)}")
        lines.append(f"- **Total Amount Paid:** {format_inr(fare.total)} ({booking.payment_method.upper()})")
        return "\n".join(lines)
