"""Topic management utilities."""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import TemaNotFoundError
from models.tema import TemaModel
from schemas.tema import TemaCreate, TemaUpdate

logger = logging.getLogger(__name__)


class TemaManager:
    """Manages topic CRUD operations."""

    def __init__(self, db: Session):
        self.db = db

    def listar(self) -> List[TemaModel]:
        return self.db.query(TemaModel).order_by(TemaModel.id).all()

    def buscar_por_id(self, tema_id: int) -> TemaModel:
        model = self.db.get(TemaModel, tema_id)
        if model is None:
            raise TemaNotFoundError(tema_id)
        return model

    def buscar_por_descricao(self, descricao: str) -> List[TemaModel]:
        """List topics whose description contains `descricao`, ignoring case."""
        return (
            self.db.query(TemaModel)
            .filter(TemaModel.descricao.icontains(descricao, autoescape=True))
            .order_by(TemaModel.id)
            .all()
        )

    def criar(self, dados: TemaCreate) -> TemaModel:
        model = TemaModel(descricao=dados.descricao)
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info("Created tema %s", model.id)
        return model

    def atualizar(self, dados: TemaUpdate) -> TemaModel:
        """Overwrite a topic, inserting it under the given id if absent."""
        model = self.db.get(TemaModel, dados.id)
        if model is None:
            model = TemaModel(id=dados.id)
            self.db.add(model)
        model.descricao = dados.descricao
        self.db.commit()
        self.db.refresh(model)
        logger.info("Saved tema %s", model.id)
        return model

    def deletar(self, tema_id: int) -> None:
        """Delete a topic and its posts. Unknown ids are ignored."""
        model = self.db.get(TemaModel, tema_id)
        if model is None:
            logger.debug("Tema %s not found, nothing to delete", tema_id)
            return
        self.db.delete(model)
        self.db.commit()
        logger.info("Deleted tema %s", tema_id)
