import logging
import threading
from typing import Dict, Iterable, List, Optional

from .models import (
    DirectorCreate,
    DirectorRecord,
    DirectorUpdate,
    MovieCreate,
    MovieRecord,
    MovieUpdate,
)

logger = logging.getLogger(__name__)


class CatalogStore:
    """In-memory directors/movies tables.

    Both tables keep insertion order. Ids come from per-table counters that
    only move forward, so an id freed by a delete is never handed out again.
    Every public method holds the store lock for its whole duration.
    """

    def __init__(
        self,
        directors: Iterable[DirectorRecord] = (),
        movies: Iterable[MovieRecord] = (),
    ) -> None:
        self._lock = threading.Lock()
        self._directors: Dict[int, DirectorRecord] = {d.id: d for d in directors}
        self._movies: Dict[int, MovieRecord] = {m.id: m for m in movies}
        self._director_seq: int = max(self._directors, default=0) + 1
        self._movie_seq: int = max(self._movies, default=0) + 1

    # ---------- directors ----------

    def get_director(self, director_id: int) -> Optional[DirectorRecord]:
        with self._lock:
            return self._directors.get(director_id)

    def get_directors(self, director_ids: List[int]) -> List[Optional[DirectorRecord]]:
        with self._lock:
            return [self._directors.get(did) for did in director_ids]

    def list_directors(self) -> List[DirectorRecord]:
        with self._lock:
            return list(self._directors.values())

    def add_director(self, dto: DirectorCreate) -> DirectorRecord:
        with self._lock:
            did = self._director_seq
            self._director_seq += 1
            director = DirectorRecord(id=did, **dto.model_dump())
            self._directors[did] = director
        logger.info("Added director id=%s name=%r", director.id, director.name)
        return director

    def update_director(self, director_id: int, dto: DirectorUpdate) -> Optional[DirectorRecord]:
        with self._lock:
            existing = self._directors.get(director_id)
            if existing is None:
                logger.info("Director id=%s not found for update", director_id)
                return None
            patch = dto.model_dump(exclude_none=True)  # only provided fields
            updated = existing.model_copy(update=patch)
            self._directors[director_id] = updated
        logger.info("Updated director id=%s fields=%s", director_id, sorted(patch))
        return updated

    def delete_director(self, director_id: int) -> bool:
        # movies pointing at this director are left in place
        with self._lock:
            removed = self._directors.pop(director_id, None) is not None
        logger.info("Delete director id=%s removed=%s", director_id, removed)
        return removed

    # ---------- movies ----------

    def get_movie(self, movie_id: int) -> Optional[MovieRecord]:
        with self._lock:
            return self._movies.get(movie_id)

    def list_movies(self) -> List[MovieRecord]:
        with self._lock:
            return list(self._movies.values())

    def movies_for_director(self, director_id: int) -> List[MovieRecord]:
        return self.movies_for_directors([director_id])[0]

    def movies_for_directors(self, director_ids: List[int]) -> List[List[MovieRecord]]:
        with self._lock:
            grouped: Dict[int, List[MovieRecord]] = {did: [] for did in director_ids}
            for movie in self._movies.values():
                if movie.director_id in grouped:
                    grouped[movie.director_id].append(movie)
            return [list(grouped[did]) for did in director_ids]

    def add_movie(self, dto: MovieCreate) -> MovieRecord:
        with self._lock:
            mid = self._movie_seq
            self._movie_seq += 1
            movie = MovieRecord(id=mid, **dto.model_dump())
            self._movies[mid] = movie
        logger.info(
            "Added movie id=%s name=%r director_id=%s", movie.id, movie.name, movie.director_id
        )
        return movie

    def update_movie(self, movie_id: int, dto: MovieUpdate) -> Optional[MovieRecord]:
        with self._lock:
            existing = self._movies.get(movie_id)
            if existing is None:
                logger.info("Movie id=%s not found for update", movie_id)
                return None
            patch = dto.model_dump(exclude_none=True)
            updated = existing.model_copy(update=patch)
            self._movies[movie_id] = updated
        logger.info("Updated movie id=%s fields=%s", movie_id, sorted(patch))
        return updated

    def delete_movie(self, movie_id: int) -> bool:
        with self._lock:
            removed = self._movies.pop(movie_id, None) is not None
        logger.info("Delete movie id=%s removed=%s", movie_id, removed)
        return removed

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {"directors": len(self._directors), "movies": len(self._movies)}
