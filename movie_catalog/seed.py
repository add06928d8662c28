from .models import DirectorRecord, MovieRecord
from .store import CatalogStore

# ----------------------------
# Seed rows (loaded once at startup)
# ----------------------------
DIRECTORS = [
    {"id": 1, "name": "Christopher Nolan"},
    {"id": 2, "name": "Quentin Tarantino"},
    {"id": 3, "name": "Hayao Miyazaki"},
]

MOVIES = [
    {"id": 1, "name": "Inception", "director_id": 1},
    {"id": 2, "name": "The Dark Knight", "director_id": 1},
    {"id": 3, "name": "Pulp Fiction", "director_id": 2},
    {"id": 4, "name": "Kill Bill: Vol. 1", "director_id": 2},
    {"id": 5, "name": "Spirited Away", "director_id": 3},
    {"id": 6, "name": "My Neighbor Totoro", "director_id": 3},
]


def seeded_store() -> CatalogStore:
    return CatalogStore(
        directors=[DirectorRecord(**d) for d in DIRECTORS],
        movies=[MovieRecord(**m) for m in MOVIES],
    )
