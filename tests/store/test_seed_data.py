"""
Tests for seed data loading and validation
"""

import json

import pytest

from moviegraph.store import RecordStore, SeedDataError, default_seed, load_seed, load_seed_file


def write_seed(tmp_path, payload) -> str:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


@pytest.mark.unit
class TestDefaultSeed:
    def test_default_seed_contents(self):
        seed = default_seed()

        assert [(a.id, a.name) for a in seed.actors] == [
            (1, "Actor A"),
            (2, "Actor B"),
            (3, "Actor C"),
        ]
        assert [(m.id, m.name, m.actor_id) for m in seed.movies] == [
            (1, "Movie A", 1),
            (2, "Movie B", 2),
            (3, "Movie C", 2),
        ]
        assert seed.dangling_movies() == []

    def test_load_seed_without_path_uses_default(self):
        assert load_seed(None) == default_seed()

    def test_store_from_seed(self):
        store = RecordStore.from_seed(default_seed())

        assert store.actor_count == 3
        assert store.movie_count == 3
        assert store.find_movie_by_id(3).actor_id == 2


@pytest.mark.unit
class TestSeedFile:
    def test_load_seed_file_with_camel_case_keys(self, tmp_path):
        path = write_seed(
            tmp_path,
            {
                "actors": [{"id": 10, "name": "Someone"}],
                "movies": [{"id": 1, "name": "Something", "actorId": 10}],
            },
        )

        seed = load_seed_file(path)

        assert seed.movies[0].actor_id == 10
        assert seed.actors[0].name == "Someone"

    def test_load_seed_file_with_snake_case_keys(self, tmp_path):
        path = write_seed(
            tmp_path,
            {"actors": [], "movies": [{"id": 1, "name": "Something", "actor_id": 4}]},
        )

        assert load_seed(path).movies[0].actor_id == 4

    def test_dangling_references_are_tolerated(self, tmp_path):
        path = write_seed(
            tmp_path,
            {
                "actors": [{"id": 1, "name": "Actor A"}],
                "movies": [{"id": 1, "name": "Lost", "actorId": 5}],
            },
        )

        seed = load_seed_file(path)

        assert [m.id for m in seed.dangling_movies()] == [1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedDataError, match="Cannot read seed file"):
            load_seed_file(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(SeedDataError, match="not valid JSON"):
            load_seed_file(path)

    @pytest.mark.parametrize(
        "payload",
        [
            {"actors": [{"id": 1, "name": ""}]},
            {"movies": [{"id": 1, "name": "No actor"}]},
            {"movies": [{"id": "one", "name": "Bad id", "actorId": 1}]},
            ["not", "an", "object"],
        ],
    )
    def test_invalid_shape(self, tmp_path, payload):
        path = write_seed(tmp_path, payload)

        with pytest.raises(SeedDataError, match="is invalid"):
            load_seed_file(path)
