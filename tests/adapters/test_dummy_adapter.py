from deckofcards.adapters.dummy import DummyAdapter
from deckofcards.events import TableEventType
from deckofcards.table.constants import Intent


def test_script_is_replayed_in_order():
    adapter = DummyAdapter([("deal", (5,)), (Intent.DRAW, ())])

    assert adapter.request_intent() == (Intent.DEAL, (5,))
    assert adapter.request_intent() == (Intent.DRAW, ())
    assert adapter.request_intent() is None


def test_empty_script():
    assert DummyAdapter().request_intent() is None


def test_records_views_and_events():
    adapter = DummyAdapter()
    adapter.render_table_state({"deck_count": 52, "hand": []})
    adapter.notify_event(TableEventType.CARD_DRAWN, {"card": "A♠"})
    adapter.notify_event("ACTION_REJECTED", {"reason": "empty_deck"})

    assert adapter.rendered_states == [{"deck_count": 52, "hand": []}]
    assert adapter.get_events_by_type(TableEventType.CARD_DRAWN) == [{"card": "A♠"}]
    assert adapter.get_events_by_type("ACTION_REJECTED") == [{"reason": "empty_deck"}]

    adapter.clear()
    assert adapter.events == []
    assert adapter.rendered_states == []
