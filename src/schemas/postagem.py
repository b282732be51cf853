"""Postagem schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.resumo import Referencia, TemaResumo, UsuarioResumo, garantir_utc


class PostagemBase(BaseModel):
    titulo: str = Field(
        description="The title of the post.",
        min_length=5,
        max_length=100,
    )
    texto: str = Field(
        description="The body of the post.",
        min_length=10,
        max_length=1000,
    )
    tema: Optional[Referencia] = Field(
        default=None,
        description="The topic of the post, referenced by id.",
    )
    usuario: Optional[Referencia] = Field(
        default=None,
        description="The author of the post, referenced by id.",
    )


class PostagemCreate(PostagemBase):
    pass


class PostagemUpdate(PostagemBase):
    """Full replacement of a post; the body must carry the post id."""

    id: int = Field(description="The identifier of the post to overwrite.")


class Postagem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    titulo: str
    texto: str
    data: Optional[datetime] = None
    tema: Optional[TemaResumo] = None
    usuario: Optional[UsuarioResumo] = None

    @field_validator("data")
    @classmethod
    def data_em_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return garantir_utc(value)
