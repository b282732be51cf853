"""Summary schemas embedded in other resources.

Relations are serialized one level deep: a post shows its topic and author,
a topic or user shows its posts, never the other way around again.
"""

from datetime import datetime
from typing import Optional

import pytz
from pydantic import BaseModel, ConfigDict, Field, field_validator


def garantir_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps; SQLite does not keep the offset."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=pytz.utc)
    return value


class Referencia(BaseModel):
    """Reference to an existing record by id. Extra fields are ignored."""

    id: int = Field(description="The identifier of the referenced record.")


class TemaResumo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    descricao: str


class UsuarioResumo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    usuario: str
    foto: Optional[str] = None


class PostagemResumo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    texto: str
    data: Optional[datetime] = None

    @field_validator("data")
    @classmethod
    def data_em_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return garantir_utc(value)
