"""Tests for the 3D word-cloud figure."""

import pytest

from word_space.core.session import build_session
from word_space.visualization.scatter import WordSpacePlotBuilder, word_color


@pytest.fixture(scope="module")
def session(random_store, random_axis_words, random_axis_set):
    return build_session(random_store, random_axis_words, random_axis_set, top_k=120)


def test_word_color():
    assert word_color(0.0, 0.35) == "rgba(140, 140, 170, 0.350)"
    assert word_color(1.0) == "rgba(255, 230, 255, 1.000)"


def test_words_and_beacons(session):
    fig = WordSpacePlotBuilder().build(session)
    names = [trace.name for trace in fig.data]
    assert names[0] == "Words"
    assert len(fig.data[0].x) == 120
    assert len(names) == 1 + 6
    beacon_texts = [trace.text[0] for trace in fig.data[1:]]
    assert beacon_texts == [w.upper() for w in session.axis_words.as_list()]


def test_culled_words_hidden(session):
    far_away = (1e6, 0, 0)
    frame = session.index.update(far_away)
    fig = WordSpacePlotBuilder().build(session, frame=frame, viewer_position=far_away)
    assert len(fig.data[0].x) == 0
    assert fig.data[-1].name == "You"


def test_nearby_trace(session):
    position = session.projected_words[0].position
    frame = session.index.update(position)
    nearby = session.index.nearest(position, k=5)
    fig = WordSpacePlotBuilder(height=400, width=500).build(
        session, frame=frame, nearby=nearby, viewer_position=position
    )
    names = [trace.name for trace in fig.data]
    assert names[:2] == ["Words", "Nearby"]
    assert len(names) == 2 + 6 + 1
    assert list(fig.data[1].text) == [w.word for w in nearby]
    assert fig.layout.height == 400
    assert fig.layout.scene.aspectmode == "data"
