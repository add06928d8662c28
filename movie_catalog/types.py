from typing import Optional

import strawberry
from strawberry.types import Info

from .models import DirectorRecord, MovieRecord


# ----------------------------
# GraphQL Types
# ----------------------------
@strawberry.type(description="This represents a movie directed by a director")
class Movie:
    id: int
    name: str
    director_id: int

    @classmethod
    def from_record(cls, row: MovieRecord) -> "Movie":
        return cls(**row.model_dump())

    @strawberry.field
    async def director(self, info: Info) -> Optional["Director"]:
        # null when director_id points nowhere (soft reference)
        row = await info.context["director_loader"].load(self.director_id)
        return Director.from_record(row) if row else None


@strawberry.type(description="This represents a director of a movie")
class Director:
    id: int
    name: str

    @classmethod
    def from_record(cls, row: DirectorRecord) -> "Director":
        return cls(**row.model_dump())

    @strawberry.field
    async def movies(self, info: Info) -> list[Movie]:
        rows = await info.context["movies_loader"].load(self.id)
        return [Movie.from_record(r) for r in rows]


@strawberry.type(description="Outcome of a delete mutation")
class DeleteResult:
    deleted: bool
    id: int
    message: str

    @classmethod
    def for_entity(cls, entity: str, id: int, deleted: bool) -> "DeleteResult":
        if deleted:
            message = f"{entity} with ID {id} has been deleted."
        else:
            message = f"{entity} with ID {id} not found."
        return cls(deleted=deleted, id=id, message=message)
