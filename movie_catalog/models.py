from typing import Optional

from pydantic import BaseModel

# ---------- DTOs (Pydantic models) ----------

class DirectorCreate(BaseModel):
    name: str

class DirectorRecord(DirectorCreate):
    id: int

class DirectorUpdate(BaseModel):
    # partial update; None means "leave as is"
    name: Optional[str] = None


class MovieCreate(BaseModel):
    name: str
    director_id: int  # soft reference, never checked

class MovieRecord(MovieCreate):
    id: int

class MovieUpdate(BaseModel):
    name: Optional[str] = None
    director_id: Optional[int] = None
