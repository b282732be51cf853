"""Usuario database model.

This module defines the Usuario database model using SQLAlchemy.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class UsuarioModel(Base):
    """Usuario database model."""

    __tablename__ = "tb_usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    usuario = Column(String(255), unique=True, index=True, nullable=False)
    senha = Column(String(255), nullable=False)  # bcrypt hash
    foto = Column(String(5000), nullable=True)

    postagem = relationship(
        "PostagemModel",
        back_populates="usuario",
        cascade="all, delete",
    )
