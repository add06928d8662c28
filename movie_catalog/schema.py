import strawberry
from strawberry.types import Info

from .models import DirectorCreate, DirectorUpdate, MovieCreate, MovieUpdate
from .store import CatalogStore
from .types import DeleteResult, Director, Movie


def _store(info: Info) -> CatalogStore:
    return info.context["store"]


def _clear_loaders(info: Info) -> None:
    # later fields in the same document must see the mutation
    info.context["director_loader"].clear_all()
    info.context["movies_loader"].clear_all()


# ----------------------------
# Query Root
# ----------------------------
@strawberry.type(description="Root Query")
class Query:
    @strawberry.field(description="A Single Movie")
    def movie(self, info: Info, id: int) -> Movie | None:
        row = _store(info).get_movie(id)
        return Movie.from_record(row) if row else None

    @strawberry.field(description="List of All Movies")
    def movies(self, info: Info) -> list[Movie]:
        return [Movie.from_record(r) for r in _store(info).list_movies()]

    @strawberry.field(description="A Single Director")
    def director(self, info: Info, id: int) -> Director | None:
        row = _store(info).get_director(id)
        return Director.from_record(row) if row else None

    @strawberry.field(description="List of All Directors")
    def directors(self, info: Info) -> list[Director]:
        return [Director.from_record(r) for r in _store(info).list_directors()]


# ----------------------------
# Mutation Root
# ----------------------------
@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="Add a movie")
    def add_movie(self, info: Info, name: str, director_id: int) -> Movie:
        row = _store(info).add_movie(MovieCreate(name=name, director_id=director_id))
        _clear_loaders(info)
        return Movie.from_record(row)

    @strawberry.mutation(description="Add a director")
    def add_director(self, info: Info, name: str) -> Director:
        row = _store(info).add_director(DirectorCreate(name=name))
        _clear_loaders(info)
        return Director.from_record(row)

    @strawberry.mutation(description="Update a movie")
    def update_movie(
        self,
        info: Info,
        id: int,
        name: str | None = None,
        director_id: int | None = None,
    ) -> Movie | None:
        # presence, not truthiness: director_id=0 is applied
        row = _store(info).update_movie(id, MovieUpdate(name=name, director_id=director_id))
        if row is None:
            return None
        _clear_loaders(info)
        return Movie.from_record(row)

    @strawberry.mutation(description="Update a director")
    def update_director(self, info: Info, id: int, name: str | None = None) -> Director | None:
        row = _store(info).update_director(id, DirectorUpdate(name=name))
        if row is None:
            return None
        _clear_loaders(info)
        return Director.from_record(row)

    @strawberry.mutation(description="Delete a movie by ID")
    def delete_movie(self, info: Info, id: int) -> DeleteResult:
        deleted = _store(info).delete_movie(id)
        if deleted:
            _clear_loaders(info)
        return DeleteResult.for_entity("Movie", id, deleted)

    @strawberry.mutation(description="Delete a director by ID")
    def delete_director(self, info: Info, id: int) -> DeleteResult:
        # no cascade: the director's movies stay, with director = null
        deleted = _store(info).delete_director(id)
        if deleted:
            _clear_loaders(info)
        return DeleteResult.for_entity("Director", id, deleted)


schema = strawberry.Schema(query=Query, mutation=Mutation)
