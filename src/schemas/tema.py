"""Tema schema definitions."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from schemas.resumo import PostagemResumo


class TemaCreate(BaseModel):
    descricao: str = Field(
        description="The topic description.",
        min_length=1,
    )


class TemaUpdate(TemaCreate):
    id: int = Field(description="The identifier of the topic to overwrite.")


class Tema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    descricao: str
    postagem: List[PostagemResumo] = []
