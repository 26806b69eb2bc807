import random

import pytest

from flashdeck.errors import EmptyDatasetError
from flashdeck.session import SessionController

from conftest import make_cards


def test_requires_cards(renderer):
    with pytest.raises(EmptyDatasetError):
        SessionController([], renderer, dataset_id="unit1")


def test_wraparound(renderer):
    session = SessionController(make_cards(3), renderer)
    session.next()
    session.next()
    assert session.current_index == 2
    session.next()
    assert session.current_index == 0
    session.previous()
    assert session.current_index == 2


def test_index_stays_in_range(renderer):
    session = SessionController(make_cards(4), renderer)
    rng = random.Random(42)
    for _ in range(500):
        rng.choice([session.next, session.previous])()
        assert 0 <= session.current_index < 4


def test_single_card_wraps_onto_itself(renderer):
    session = SessionController(make_cards(1), renderer)
    session.next()
    assert session.current_index == 0
    session.previous()
    assert session.current_index == 0


def test_flip_toggles_without_moving(renderer):
    session = SessionController(make_cards(2), renderer)
    session.flip()
    assert session.is_flipped
    assert session.current_index == 0
    assert renderer.flipped
    session.flip()
    assert not session.is_flipped
    assert not renderer.flipped


@pytest.mark.parametrize("move", ["next", "previous"])
def test_navigation_resets_flip(renderer, move):
    session = SessionController(make_cards(3), renderer)
    session.flip()
    getattr(session, move)()
    assert not session.is_flipped
    assert not renderer.flipped


def test_render_shows_card_counter_and_enables_controls(renderer):
    session = SessionController(make_cards(3), renderer)
    session.next()
    assert renderer.front == "front 1"
    assert renderer.back == "back 1"
    assert renderer.counter == "Card 2 of 3"
    assert renderer.controls_enabled


def test_current_card_and_state_snapshot(renderer):
    cards = make_cards(2)
    session = SessionController(cards, renderer)
    session.next()
    assert session.current_card() is cards[1]

    snapshot = session.state
    snapshot.current_index = 0
    assert session.current_index == 1
    assert len(session) == 2


def test_flip_reenables_controls(renderer):
    session = SessionController(make_cards(2), renderer)
    renderer.set_controls_enabled(False)

    session.flip()

    assert renderer.controls_enabled
