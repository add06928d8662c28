import asyncio

from strawberry.dataloader import DataLoader

from .models import DirectorRecord, MovieRecord
from .store import CatalogStore


# ----------------------------
# DataLoaders (BATCH LOADERS)
# ----------------------------
def make_director_loader(store: CatalogStore) -> DataLoader[int, DirectorRecord | None]:
    async def batch_load_directors(director_ids: list[int]) -> list[DirectorRecord | None]:
        await asyncio.sleep(0)
        # must come back in the SAME order as the keys
        return store.get_directors(list(director_ids))

    return DataLoader(load_fn=batch_load_directors)


def make_movies_loader(store: CatalogStore) -> DataLoader[int, list[MovieRecord]]:
    async def batch_load_movies(director_ids: list[int]) -> list[list[MovieRecord]]:
        await asyncio.sleep(0)
        return store.movies_for_directors(list(director_ids))

    return DataLoader(load_fn=batch_load_movies)


def make_context(store: CatalogStore) -> dict:
    # fresh loaders per request so cached rows never outlive one document
    return {
        "store": store,
        "director_loader": make_director_loader(store),
        "movies_loader": make_movies_loader(store),
    }
