from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class TemaModel(Base):
    __tablename__ = "tb_temas"

    id = Column(Integer, primary_key=True, index=True)
    descricao = Column(String(255), nullable=False)

    postagem = relationship(
        "PostagemModel",
        back_populates="tema",
        cascade="all, delete",
    )
