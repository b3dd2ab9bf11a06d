from __future__ import annotations

import logging
from datetime import date, timedelta

import streamlit as st

from agents.booking_flow_agent import STEPS, BookingFlowAgent, BookingStepError
from agents.travel_agent import TravelAgent
from agents.trip_planner_agent import DONE_OPTION, PlannerStep
from models.booking import ContactDetails, GuestDetails, PAYMENT_METHODS, TravelerDetails
from models.filters import (
    FLIGHT_DURATION_HOURS,
    FLIGHT_PRICE_RANGE,
    FLIGHT_SORT_KEYS,
    HOTEL_PRICE_RANGE,
    HOTEL_SORT_KEYS,
    PACKAGE_THEMES,
    STOP_OPTIONS,
    TIME_SLOTS,
    FlightFilters,
    HotelFilters,
)
from utils.airport_codes import AIRPORT_NAMES, airport_label
from utils.config import get_config
from utils.date_parser import parse_date
from utils.money import format_inr

logger = logging.getLogger(__name__)

PAGES = ["Home", "Flights", "Hotels", "Holidays", "Visa", "Trip Planner"]
TRAVELER_TITLES = ["Mr", "Mrs", "Ms", "Miss", "Master"]
GENDERS = ["male", "female", "other"]
PAYMENT_LABELS = {
    "upi": "UPI",
    "card": "Credit / Debit Card",
    "netbanking": "Net Banking",
    "wallet": "Wallet",
}

APP_STYLE = """
<style>
:root {
  --bg: #f6f7fb;
  --text: #111827;
  --muted: #6b7280;
  --accent: #7c3aed;
  --accent-2: #2563eb;
}
.hero {
  background: linear-gradient(135deg, rgba(124,58,237,0.16), rgba(37,99,235,0.12));
  border: 1px solid rgba(124,58,237,0.15);
  padding: 1.25rem 1.5rem;
  border-radius: 14px;
  margin-bottom: 1rem;
}
.hero h1 { margin: 0; color: var(--text); }
.hero p { margin: 0.25rem 0 0; color: var(--muted); }
.price { color: var(--accent); font-weight: 700; font-size: 1.2rem; }
[data-testid="stChatMessage"] {
  border: 1px solid rgba(15,23,42,0.08);
  border-radius: 12px;
}
</style>
"""


@st.cache_resource(show_spinner=False)
def setup_logging() -> None:
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def get_agent() -> TravelAgent:
    # one agent per browser session; it carries the booking in progress
    if "agent" not in st.session_state:
        st.session_state.agent = TravelAgent()
    return st.session_state.agent


def go_to(page: str) -> None:
    st.session_state.page = page


def on_nav_change() -> None:
    get_agent().reset()
    go_to(st.session_state.nav)


def start_flight(flight, passengers: int) -> None:
    get_agent().book_flight(flight, passengers=passengers)
    go_to("Booking")


def start_hotel(hotel, check_in, check_out, rooms: int, guests: int, room_id: str) -> None:
    get_agent().book_hotel(hotel, check_in, check_out, rooms=rooms, guests=guests, room_id=room_id)
    go_to("Booking")


def start_package(package, guests: int) -> None:
    get_agent().book_package(package, guests=guests)
    go_to("Booking")


def start_visa(visa, applicants: int) -> None:
    get_agent().book_visa(visa, applicants=applicants)
    go_to("Booking")


def back_home() -> None:
    get_agent().reset()
    st.session_state.nav = "Home"
    go_to("Home")


# ---- pages ----

def render_home() -> None:
    cfg = get_config()
    st.markdown(
        f"""
        <div class="hero">
          <h1>{cfg.brand_name}</h1>
          <p>{cfg.brand_tagline}. Flights, hotels, holiday packages and visas in one place.</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    cols = st.columns(4)
    cols[0].metric("Flights", "Domestic")
    cols[1].metric("Hotels", "5★ to budget")
    cols[2].metric("Holidays", "Curated")
    cols[3].metric("Visa", "6 countries")
    st.caption("Pick a section from the sidebar, or let the Trip Planner suggest an itinerary.")


def render_flights(agent: TravelAgent) -> None:
    st.header("✈️ Flights")
    codes = ["Any"] + list(AIRPORT_NAMES)
    c1, c2, c3 = st.columns(3)
    origin = c1.selectbox("From", codes, format_func=lambda c: c if c == "Any" else airport_label(c))
    destination = c2.selectbox("To", codes, format_func=lambda c: c if c == "Any" else airport_label(c))
    passengers = c3.number_input("Passengers", min_value=1, max_value=9, value=1)

    with st.sidebar.expander("Filters", expanded=True):
        price = st.slider("Price (₹)", *map(int, FLIGHT_PRICE_RANGE), value=tuple(map(int, FLIGHT_PRICE_RANGE)), step=500)
        stops = st.multiselect("Stops", list(STOP_OPTIONS))
        airlines = st.multiselect("Airlines", agent.catalog.airlines())
        dep_slots = st.multiselect("Departure time", list(TIME_SLOTS), format_func=lambda s: f"{s.title()} ({TIME_SLOTS[s]})")
        arr_slots = st.multiselect("Arrival time", list(TIME_SLOTS), format_func=lambda s: f"{s.title()} ({TIME_SLOTS[s]})")
        duration = st.slider("Duration (hours)", *map(int, FLIGHT_DURATION_HOURS), value=tuple(map(int, FLIGHT_DURATION_HOURS)))
        cabins = st.multiselect("Cabin", ["Economy", "Premium Economy", "Business", "First"])
    sort_by = st.radio("Sort by", FLIGHT_SORT_KEYS, horizontal=True, format_func=str.title)

    filters = FlightFilters(
        price_range=price,
        stops=stops,
        airlines=airlines,
        departure_slots=dep_slots,
        arrival_slots=arr_slots,
        duration_hours=duration,
        cabins=cabins,
        origin=None if origin == "Any" else origin,
        destination=None if destination == "Any" else destination,
    )
    with st.spinner("Searching flights..."):
        flights = agent.catalog.search_flights(filters, sort_by=sort_by)

    if filters.has_active_filters():
        st.caption("Filters applied")
    if not flights:
        st.info("No flights match your filters.")
    for f in flights:
        with st.container(border=True):
            left, mid, right = st.columns([2, 3, 2])
            left.markdown(f"**{f.airline}**  \n{f.flight_number} · {f.cabin}")
            dep = f.first_departure.strftime("%H:%M") if f.first_departure else "--"
            arr = f.last_arrival.strftime("%H:%M") if f.last_arrival else "--"
            stops_label = "Non-stop" if f.stops == 0 else f"{f.stops} stop(s)"
            mid.markdown(f"**{f.route_label}**  \n{dep} → {arr} · {f.duration_min // 60}h {f.duration_min % 60}m · {stops_label}")
            right.markdown(f'<span class="price">{format_inr(f.price)}</span>', unsafe_allow_html=True)
            right.button("Book", key=f"book-flight-{f.id}", on_click=start_flight, args=(f, int(passengers)))


def render_hotels(agent: TravelAgent) -> None:
    st.header("🏨 Hotels")
    c1, c2, c3, c4 = st.columns(4)
    check_in = c1.date_input("Check-in", value=date.today() + timedelta(days=7))
    check_out = c2.date_input("Check-out", value=date.today() + timedelta(days=9))
    rooms = c3.number_input("Rooms", min_value=1, max_value=5, value=1)
    guests = c4.number_input("Guests", min_value=1, max_value=10, value=2)
    query = st.text_input("Search by hotel or area")

    with st.sidebar.expander("Filters", expanded=True):
        price = st.slider("Price per night (₹)", *map(int, HOTEL_PRICE_RANGE), value=tuple(map(int, HOTEL_PRICE_RANGE)), step=500)
        stars = st.multiselect("Star rating", [5, 4, 3, 2, 1])
    sort_by = st.radio("Sort by", HOTEL_SORT_KEYS, horizontal=True, format_func=str.title)

    if not agent.pricing.stay_is_valid(check_in, check_out):
        st.warning("Check-out must be after check-in.")
        return

    with st.spinner("Finding hotels..."):
        hotels = agent.catalog.search_hotels(HotelFilters(price_range=price, stars=stars, query=query), sort_by=sort_by)
    if not hotels:
        st.info("No hotels match your filters.")
    for h in hotels:
        with st.container(border=True):
            st.markdown(f"**{h.name}** {'★' * h.stars}  \n{h.location} · {h.distance}")
            st.caption(f"{h.rating} {h.review_score} ({h.review_count} reviews) · {', '.join(h.amenities[:5])}")
            room_by_id = {r.id: r for r in agent.pricing.rooms_for(h)}
            room_id = st.radio(
                "Room",
                list(room_by_id),
                key=f"room-{h.id}",
                horizontal=True,
                format_func=lambda rid, rooms=room_by_id: f"{rooms[rid].name} · {format_inr(rooms[rid].price)}/night",
            )
            st.button(
                "Book",
                key=f"book-hotel-{h.id}",
                on_click=start_hotel,
                args=(h, check_in, check_out, int(rooms), int(guests), room_id),
            )


def render_packages(agent: TravelAgent) -> None:
    st.header("🌴 Holiday Packages")
    theme = st.radio("Theme", PACKAGE_THEMES, horizontal=True)
    guests = st.number_input("Travelers", min_value=1, max_value=20, value=2)
    with st.spinner("Loading packages..."):
        packages = agent.catalog.search_packages(theme)
    if not packages:
        st.info("No packages for this theme yet.")
    for p in packages:
        with st.container(border=True):
            st.markdown(f"**{p.title}** · {p.destination}  \n{p.duration_label} · ⭐ {p.rating} ({p.review_count})")
            st.markdown(f'<span class="price">{format_inr(p.price_per_person)}</span> per person', unsafe_allow_html=True)
            if p.itinerary:
                with st.expander("Itinerary"):
                    for d in p.itinerary:
                        st.markdown(f"**Day {d.day}: {d.title}**  \n{d.description}")
            st.button("Book", key=f"book-package-{p.id}", on_click=start_package, args=(p, int(guests)))


def render_visas(agent: TravelAgent) -> None:
    st.header("🛂 Visa")
    c1, c2 = st.columns([3, 1])
    country = c1.text_input("Search country")
    applicants = c2.number_input("Applicants", min_value=1, max_value=10, value=1)
    with st.spinner("Loading visa information..."):
        visas = agent.catalog.search_visas(country)
    if not visas:
        st.info("No visa information for that country.")
    for v in visas:
        with st.container(border=True):
            st.markdown(f"**{v.country}** · {v.visa_type}  \n{v.description}")
            st.caption(f"Processing: {v.processing_time} · Validity: {v.validity} · Fee: {format_inr(v.price)}")
            with st.expander("Requirements"):
                for r in v.requirements:
                    st.markdown(f"- {r}")
            st.button("Book", key=f"book-visa-{v.id}", on_click=start_visa, args=(v, int(applicants)))


def render_booking(agent: TravelAgent) -> None:
    flow = agent.flow
    if flow is None:
        go_to(st.session_state.get("nav", "Home"))
        st.rerun()

    title = agent.output.item_title(flow.kind, flow.session.item)
    st.header("Complete Your Booking")
    st.caption(title)
    position = STEPS.index(flow.step) + 1
    st.progress(position / len(STEPS), text=f"Step {position} of {len(STEPS)}: {flow.step.title()}")

    main, side = st.columns([3, 2])
    with side:
        render_fare(agent, flow)
    with main:
        try:
            if flow.step == "details":
                render_details_step(flow)
            elif flow.step == "payment":
                render_payment_step(flow)
            else:
                render_confirmation_step(agent, flow)
        except BookingStepError as exc:
            logger.warning("booking step rejected: %s", exc)
            st.error(str(exc))


def render_fare(agent: TravelAgent, flow: BookingFlowAgent) -> None:
    fare = flow.fare
    with st.container(border=True):
        st.subheader("Price Summary")
        st.markdown(f"**{agent.output.item_title(flow.kind, flow.session.item)}**  \n{agent.output.item_subtitle(flow.kind, flow.session.item)}")
        st.markdown(f"{fare.label}: **{format_inr(fare.base_fare)}**")
        st.markdown(f"Taxes & Fees: **{format_inr(fare.taxes)}**")
        st.markdown(f"Total: <span class='price'>{format_inr(fare.total)}</span>", unsafe_allow_html=True)


def render_details_step(flow: BookingFlowAgent) -> None:
    g = flow.guest
    with st.form("guest-details"):
        st.subheader("Guest Details")
        c1, c2 = st.columns(2)
        first = c1.text_input("First name", value=g.first_name)
        last = c2.text_input("Last name", value=g.last_name)
        email = c1.text_input("Email", value=g.email)
        phone = c2.text_input("Phone", value=g.phone)
        address = st.text_input("Address", value=g.address)
        c3, c4 = st.columns(2)
        city = c3.text_input("City", value=g.city)
        zip_code = c4.text_input("ZIP code", value=g.zip_code)
        requests_text = st.text_area("Special requests", value=g.special_requests)
        travelers = [render_traveler_form(flow, i) for i in range(flow.traveler_count)]
        submitted = st.form_submit_button("Continue to Payment")

    if submitted:
        guest = GuestDetails(first, last, email, phone, address, city, zip_code, requests_text)
        contact = ContactDetails(email=email, phone=phone) if flow.kind == "flight" else None
        errors = flow.submit_details(guest, travelers=travelers, contact=contact)
        if errors:
            for message in errors.values():
                st.error(message)
        else:
            st.rerun()


def render_traveler_form(flow: BookingFlowAgent, index: int) -> TravelerDetails:
    t = flow.travelers[index] if index < len(flow.travelers) else TravelerDetails()
    st.markdown(f"**Traveler {index + 1}**")
    c1, c2, c3 = st.columns([1, 2, 2])
    title = c1.selectbox("Title", TRAVELER_TITLES, index=TRAVELER_TITLES.index(t.title) if t.title in TRAVELER_TITLES else 0, key=f"t{index}-title")
    first = c2.text_input("First name", value=t.first_name, key=f"t{index}-first")
    last = c3.text_input("Last name", value=t.last_name, key=f"t{index}-last")
    c4, c5, c6 = st.columns(3)
    dob = c4.date_input(
        "Date of birth",
        value=parse_date(t.date_of_birth),
        min_value=date(1900, 1, 1),
        max_value=date.today(),
        key=f"t{index}-dob",
    )
    gender = c5.selectbox("Gender", GENDERS, index=GENDERS.index(t.gender) if t.gender in GENDERS else 0, format_func=str.title, key=f"t{index}-gender")
    nationality = c6.text_input("Nationality", value=t.nationality, key=f"t{index}-nationality")
    passport = st.text_input("Passport number (international travel)", value=t.passport_number or "", key=f"t{index}-passport")
    return TravelerDetails(
        title=title,
        first_name=first,
        last_name=last,
        date_of_birth=dob.isoformat() if dob else "",
        gender=gender,
        nationality=nationality,
        passport_number=passport or None,
    )


def render_payment_step(flow: BookingFlowAgent) -> None:
    st.subheader("Payment")
    method = st.radio("Payment method", list(PAYMENT_METHODS), format_func=PAYMENT_LABELS.get)
    st.caption("This is a demo: no money is charged.")
    c1, c2 = st.columns(2)
    if c1.button("← Back"):
        flow.back()
        st.rerun()
    if c2.button(f"Pay {format_inr(flow.fare.total)}", type="primary"):
        with st.spinner("Processing payment..."):
            flow.pay(method)
        st.rerun()


def render_confirmation_step(agent: TravelAgent, flow: BookingFlowAgent) -> None:
    st.success("Booking Confirmed!")
    st.markdown(agent.output.summary_markdown(flow.booking))
    st.download_button(
        "Download Confirmation",
        data=flow.confirmation_html(),
        file_name=flow.confirmation_filename(),
        mime="text/html",
    )
    if flow.kind == "flight":
        st.download_button(
            "Download E-Ticket",
            data=agent.output.ticket_html(flow.booking),
            file_name=f"E-Ticket-{flow.booking_id}.html",
            mime="text/html",
        )
    st.button("Back to Home", on_click=back_home)


def render_planner(agent: TravelAgent) -> None:
    planner = agent.planner
    st.header("✨ AI Trip Planner")
    if st.button("Start over"):
        planner.reset()
        st.rerun()

    for m in planner.messages:
        role = "user" if m.role in ("user", "quick-reply") else "assistant"
        st.chat_message(role).markdown(m.content)

    if planner.step == PlannerStep.INTERESTS and planner.prefs.interests:
        st.caption("Selected: " + ", ".join(planner.prefs.interests))

    options = planner.options
    if options:
        cols = st.columns(min(4, len(options)))
        for i, option in enumerate(options):
            selected = option in planner.prefs.interests
            label = f"✓ {option}" if selected else option
            if cols[i % len(cols)].button(label, key=f"qr-{planner.step.value}-{i}"):
                spinner = "Creating your itinerary..." if option == DONE_OPTION else "Typing..."
                with st.spinner(spinner):
                    planner.quick_reply(option)
                st.rerun()

    if planner.step == PlannerStep.COMPLETE and planner.itinerary:
        st.markdown(str(planner.itinerary))
        st.download_button(
            "Download Itinerary",
            data=planner.itinerary_html(),
            file_name=planner.itinerary_filename(),
            mime="text/html",
        )

    prompt = st.chat_input("Type your answer")
    if prompt:
        with st.spinner("Typing..."):
            planner.send(prompt)
        st.rerun()


st.set_page_config(page_title=get_config().brand_name, page_icon="✈️", layout="wide")
setup_logging()
st.markdown(APP_STYLE, unsafe_allow_html=True)

if "page" not in st.session_state:
    st.session_state.page = "Home"

agent = get_agent()
st.sidebar.title(get_config().brand_name)
st.sidebar.radio("Go to", PAGES, key="nav", on_change=on_nav_change)

page = st.session_state.page
try:
    if page == "Booking":
        render_booking(agent)
    elif page == "Flights":
        render_flights(agent)
    elif page == "Hotels":
        render_hotels(agent)
    elif page == "Holidays":
        render_packages(agent)
    elif page == "Visa":
        render_visas(agent)
    elif page == "Trip Planner":
        render_planner(agent)
    else:
        render_home()
except ValueError as exc:
    logger.exception("page %s failed", page)
    st.error(f"Sorry, something went wrong: {exc}")
