"""Usuario schema definitions.

This module defines the user payloads for registration, update and login,
and the user representation returned by the API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.resumo import PostagemResumo


class UsuarioCreate(BaseModel):
    nome: str = Field(description="The display name.", min_length=1)
    usuario: str = Field(description="The unique username.", min_length=1)
    senha: str = Field(description="The plaintext password.", min_length=1)
    foto: Optional[str] = Field(default=None, description="Profile picture URL.")


class UsuarioUpdate(UsuarioCreate):
    id: int = Field(description="The identifier of the user to overwrite.")


class Usuario(BaseModel):
    """User as stored; `senha` holds the bcrypt hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    usuario: str
    senha: str
    foto: Optional[str] = None
    postagem: List[PostagemResumo] = []


class UsuarioLogin(BaseModel):
    """Login attempt, echoed back with the user data and token on success."""

    id: Optional[int] = None
    nome: Optional[str] = None
    usuario: str = Field(description="The username.")
    senha: str = Field(description="Plaintext on input, stored hash on output.")
    foto: Optional[str] = None
    token: Optional[str] = Field(
        default=None,
        description="HTTP Basic token, set only on successful authentication.",
    )
