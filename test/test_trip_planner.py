from agents.trip_planner_agent import (
    DONE_OPTION,
    GREETING,
    HANDOFF,
    INTERESTS,
    NEED_INTEREST,
    PlannerStep,
    TripPlannerAgent,
)
from utils.config import AppConfig


def planner(waits=None):
    if waits is None:
        return TripPlannerAgent(config=AppConfig.instant())
    cfg = AppConfig(typing_delay=1.0, itinerary_delay=3.0)
    return TripPlannerAgent(config=cfg, sleep=waits.append)


def answer_until_interests(p):
    p.quick_reply("Plan a trip to Bali")
    p.quick_reply("5-7 days")
    p.quick_reply("Luxury (₹80k+)")
    p.quick_reply("Couple")


def test_opening_messages():
    p = planner()
    assert p.step == PlannerStep.DESTINATION
    assert [m.content for m in p.messages] == [GREETING, "Where would you like to go?"]
    assert "Plan a trip to Bali" in p.options


def test_destination_quick_reply_is_cleaned():
    p = planner()
    reply = p.quick_reply("Plan a trip to Bali")
    assert p.prefs.destination == "Bali"
    assert p.step == PlannerStep.DURATION
    assert reply[0].content == "Great choice! 🎉 How long would you like to stay?"
    assert reply[0].options == ["3-4 days", "5-7 days", "1 week", "10-14 days"]

    p = planner()
    p.quick_reply("Weekend getaway near me")
    assert p.prefs.destination == "Weekend getaway India"


def test_free_text_answers_are_stored_verbatim():
    p = planner()
    p.send("Goa")
    p.send("a long weekend")
    assert p.prefs.destination == "Goa"
    assert p.prefs.duration == "a long weekend"
    assert p.step == PlannerStep.BUDGET
    assert p.options[0] == "Budget (₹20k-40k)"


def test_interest_quick_replies_toggle_silently():
    p = planner()
    answer_until_interests(p)
    assert p.step == PlannerStep.INTERESTS
    assert p.options == INTERESTS + [DONE_OPTION]
    before = len(p.messages)
    p.quick_reply(INTERESTS[0])
    p.quick_reply(INTERESTS[2])
    p.quick_reply(INTERESTS[2])
    assert p.prefs.interests == [INTERESTS[0]]
    assert len(p.messages) == before


def test_free_text_is_ignored_on_interests():
    p = planner()
    answer_until_interests(p)
    assert p.send("beaches please") == []
    assert p.prefs.interests == []
    assert p.step == PlannerStep.INTERESTS


def test_done_without_interests_asks_again():
    p = planner()
    answer_until_interests(p)
    reply = p.quick_reply(DONE_OPTION)
    assert [m.content for m in reply] == [NEED_INTEREST]
    assert p.step == PlannerStep.INTERESTS
    assert p.itinerary is None


def test_full_conversation_generates_itinerary():
    p = planner()
    answer_until_interests(p)
    p.quick_reply("🏖️ Beach & Relaxation")
    reply = p.quick_reply(DONE_OPTION)

    assert p.step == PlannerStep.COMPLETE
    assert reply[0].content == HANDOFF
    assert reply[1].content == (
        "✨ Your personalized 5-day itinerary for Bali is ready! "
        "I've planned activities based on your interests: 🏖️ Beach & Relaxation. "
        "Budget: Luxury (₹80k+). Perfect for Couple!"
    )
    assert len(p.itinerary.days) == 5
    assert p.itinerary_filename() == "Bali-Itinerary-SuvidhaEscapes.html"
    assert "Beach Morning" in p.itinerary_html()


def test_input_after_completion_is_ignored():
    p = planner()
    answer_until_interests(p)
    p.quick_reply(INTERESTS[1])
    p.quick_reply(DONE_OPTION)
    count = len(p.messages)
    assert p.send("Another trip?") == []
    assert p.quick_reply("Solo") == []
    assert len(p.messages) == count
    assert p.options == []


def test_typing_and_generation_delays():
    waits = []
    p = planner(waits)
    p.quick_reply("Plan a trip to Bali")
    assert waits == [1.0]
    p.quick_reply("1 week")
    p.quick_reply("Solo")
    p.quick_reply("Solo")
    p.quick_reply(INTERESTS[3])
    assert waits == [1.0] * 4
    p.quick_reply(DONE_OPTION)
    assert waits == [1.0] * 5 + [3.0]
    assert not p.is_typing


def test_reset_restarts_the_script():
    p = planner()
    answer_until_interests(p)
    p.reset()
    assert p.step == PlannerStep.DESTINATION
    assert p.prefs.destination is None
    assert len(p.messages) == 2
