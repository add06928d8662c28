"""
Unit tests for the in-memory catalog store
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from movie_catalog.models import (
    DirectorCreate,
    DirectorUpdate,
    MovieCreate,
    MovieUpdate,
)
from movie_catalog.seed import DIRECTORS, MOVIES
from movie_catalog.store import CatalogStore


class TestReads:
    def test_seeded_directors_by_id(self, store):
        """Every seeded director is found by id with its name"""
        for row in DIRECTORS:
            assert store.get_director(row["id"]).name == row["name"]

    def test_list_keeps_seed_order(self, store):
        assert [m.id for m in store.list_movies()] == [1, 2, 3, 4, 5, 6]
        assert [d.id for d in store.list_directors()] == [1, 2, 3]

    def test_missing_ids_return_none(self, store):
        assert store.get_movie(99) is None
        assert store.get_director(-1) is None

    def test_movies_for_director(self, store):
        names = [m.name for m in store.movies_for_director(3)]
        assert names == ["Spirited Away", "My Neighbor Totoro"]
        assert store.movies_for_director(42) == []

    def test_batch_lookups_follow_key_order(self, store):
        """Batch results line up with the requested keys, duplicates included"""
        rows = store.get_directors([3, 99, 1, 3])
        assert [r.id if r else None for r in rows] == [3, None, 1, 3]
        grouped = store.movies_for_directors([2, 7])
        assert [m.id for m in grouped[0]] == [3, 4]
        assert grouped[1] == []


class TestAdds:
    def test_add_director_appends(self, store):
        director = store.add_director(DirectorCreate(name="Greta Gerwig"))
        assert director.id == 4
        assert store.list_directors()[-1] == director
        assert store.counts()["directors"] == 4

    def test_add_movie_accepts_unknown_director(self, store):
        movie = store.add_movie(MovieCreate(name="X", director_id=77))
        assert movie.id == 7
        assert store.get_movie(7).director_id == 77

    def test_ids_not_reused_after_delete(self, store):
        """Deleting the last row then adding must not hand out the same id"""
        assert store.delete_movie(6)
        movie = store.add_movie(MovieCreate(name="Ponyo", director_id=3))
        assert movie.id == 7
        assert len({m.id for m in store.list_movies()}) == 6

    def test_empty_store_starts_at_one(self):
        store = CatalogStore()
        assert store.add_director(DirectorCreate(name="A")).id == 1
        assert store.add_movie(MovieCreate(name="B", director_id=1)).id == 1

    def test_concurrent_adds_get_unique_ids(self, store):
        """Parallel writers never share an id"""
        workers = 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            added = list(
                pool.map(
                    lambda n: store.add_movie(MovieCreate(name=f"Movie {n}", director_id=1)),
                    range(workers),
                )
            )
        ids = sorted(m.id for m in added)
        assert ids == list(range(7, 7 + workers))
        assert store.counts()["movies"] == 6 + workers
        assert len({m.id for m in store.list_movies()}) == 6 + workers

    def test_add_is_logged(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="movie_catalog.store"):
            store.add_movie(MovieCreate(name="Memento", director_id=1))
        assert "Added movie id=7" in caplog.text


class TestUpdates:
    def test_update_name_only(self, store):
        updated = store.update_movie(3, MovieUpdate(name="Jackie Brown"))
        assert updated.name == "Jackie Brown"
        assert updated.director_id == 2
        assert store.get_movie(3) == updated

    def test_falsy_director_id_is_applied(self, store):
        updated = store.update_movie(1, MovieUpdate(director_id=0))
        assert updated.director_id == 0
        assert updated.name == "Inception"

    def test_empty_patch_leaves_row(self, store):
        before = store.get_director(2)
        assert store.update_director(2, DirectorUpdate()) == before

    def test_update_missing_returns_none(self, store):
        before = store.list_movies()
        assert store.update_movie(50, MovieUpdate(name="Y")) is None
        assert store.update_director(50, DirectorUpdate(name="Y")) is None
        assert store.list_movies() == before


class TestDeletes:
    def test_delete_movie_removes_only_that_row(self, store):
        before = store.list_movies()
        assert store.delete_movie(2) is True
        assert store.list_movies() == [m for m in before if m.id != 2]

    def test_delete_missing_is_false(self, store):
        before = store.list_movies()
        assert store.delete_movie(99) is False
        assert store.delete_director(99) is False
        assert store.list_movies() == before

    def test_delete_director_keeps_movies(self, store):
        """No cascade: orphaned movies stay in the table"""
        assert store.delete_director(1) is True
        assert [m.id for m in store.movies_for_director(1)] == [1, 2]
        assert store.counts() == {"directors": 2, "movies": len(MOVIES)}
