"""
Unit tests for actor/movie relation lookups
"""

import pytest

from moviegraph.store import (
    Actor,
    Movie,
    RecordStore,
    actor_of,
    movies_by_actor_ids,
    movies_of,
)


@pytest.fixture
def interleaved_store():
    return RecordStore(
        actors=[Actor(id=1, name="Actor A"), Actor(id=2, name="Actor B")],
        movies=[
            Movie(id=1, name="One", actor_id=2),
            Movie(id=2, name="Two", actor_id=1),
            Movie(id=3, name="Three", actor_id=2),
            Movie(id=4, name="Four", actor_id=7),
        ],
    )


@pytest.mark.unit
class TestActorOf:
    def test_actor_of_movie(self, store):
        movie = store.find_movie_by_id(1)

        assert actor_of(store, movie) == Actor(id=1, name="Actor A")

    def test_dangling_reference_returns_none(self, interleaved_store):
        movie = interleaved_store.find_movie_by_id(4)

        assert actor_of(interleaved_store, movie) is None


@pytest.mark.unit
class TestMoviesOf:
    def test_movies_of_each_actor_match_actor_id(self, interleaved_store):
        for actor in interleaved_store.list_actors():
            expected = [m for m in interleaved_store.list_movies() if m.actor_id == actor.id]
            assert movies_of(interleaved_store, actor) == expected

    def test_movies_of_keeps_insertion_order(self, interleaved_store):
        actor = interleaved_store.find_actor_by_id(2)

        assert [m.name for m in movies_of(interleaved_store, actor)] == ["One", "Three"]

    def test_actor_without_movies(self, store):
        actor = store.find_actor_by_id(3)

        assert movies_of(store, actor) == []

    def test_movies_of_sees_added_movie(self, store):
        actor = store.find_actor_by_id(3)
        added = store.add_movie(name="Late Debut", actor_id=3)

        assert movies_of(store, actor) == [added]


@pytest.mark.unit
class TestMoviesByActorIds:
    def test_aligned_with_requested_ids(self, interleaved_store):
        result = movies_by_actor_ids(interleaved_store, [2, 99, 1])

        assert [[m.id for m in group] for group in result] == [[1, 3], [], [2]]

    def test_repeated_ids_get_independent_lists(self, interleaved_store):
        first, second = movies_by_actor_ids(interleaved_store, [1, 1])

        assert first == second
        first.clear()
        assert second
