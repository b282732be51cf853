from datetime import datetime

import pytz
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(pytz.utc)


class PostagemModel(Base):
    __tablename__ = "tb_postagens"

    id = Column(Integer, primary_key=True, index=True)
    titulo = Column(String(100), nullable=False)
    texto = Column(String(1000), nullable=False)
    data = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    tema_id = Column(Integer, ForeignKey("tb_temas.id", ondelete="CASCADE"), index=True)
    usuario_id = Column(
        Integer, ForeignKey("tb_usuarios.id", ondelete="CASCADE"), index=True
    )

    tema = relationship("TemaModel", back_populates="postagem")
    usuario = relationship("UsuarioModel", back_populates="postagem")
