"""Post management utilities.

This module provides CRUD operations for posts, including the
case-insensitive title search and resolution of the topic and author
references carried by incoming posts.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.exceptions import (
    PostagemNotFoundError,
    TemaNotFoundError,
    UsuarioNotFoundError,
)
from models.postagem import PostagemModel
from models.tema import TemaModel
from models.usuario import UsuarioModel
from schemas.postagem import PostagemBase, PostagemCreate, PostagemUpdate

logger = logging.getLogger(__name__)


class PostagemManager:
    """Manages post CRUD operations using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize PostagemManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def listar(self) -> List[PostagemModel]:
        """List all posts.

        Returns:
            List of PostagemModel instances ordered by id.
        """
        return self.db.query(PostagemModel).order_by(PostagemModel.id).all()

    def buscar_por_id(self, postagem_id: int) -> PostagemModel:
        """Get a post by id.

        Args:
            postagem_id: Post ID to look up.

        Returns:
            The PostagemModel.

        Raises:
            PostagemNotFoundError: If no post has this id.
        """
        model = self.db.get(PostagemModel, postagem_id)
        if model is None:
            raise PostagemNotFoundError(postagem_id)
        return model

    def buscar_por_titulo(self, titulo: str) -> List[PostagemModel]:
        """List posts whose title contains `titulo`, ignoring case.

        Args:
            titulo: Substring to search for. `%` and `_` match literally.

        Returns:
            Matching posts ordered by id.
        """
        return (
            self.db.query(PostagemModel)
            .filter(PostagemModel.titulo.icontains(titulo, autoescape=True))
            .order_by(PostagemModel.id)
            .all()
        )

    def criar(self, dados: PostagemCreate) -> PostagemModel:
        """Create a post.

        Args:
            dados: Post payload.

        Returns:
            The stored PostagemModel with its assigned id and timestamp.

        Raises:
            TemaNotFoundError: If the referenced topic does not exist.
            UsuarioNotFoundError: If the referenced author does not exist.
        """
        model = PostagemModel()
        self._preencher(model, dados)
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info("Created postagem %s", model.id)
        return model

    def atualizar(self, dados: PostagemUpdate) -> PostagemModel:
        """Overwrite a post, inserting it under the given id if absent.

        Args:
            dados: Full post payload including its id.

        Returns:
            The stored PostagemModel.

        Raises:
            TemaNotFoundError: If the referenced topic does not exist.
            UsuarioNotFoundError: If the referenced author does not exist.
        """
        model = self.db.get(PostagemModel, dados.id)
        if model is None:
            model = PostagemModel(id=dados.id)
        self._preencher(model, dados)
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        logger.info("Saved postagem %s", model.id)
        return model

    def deletar(self, postagem_id: int) -> None:
        """Delete a post by id. Unknown ids are ignored.

        Args:
            postagem_id: Post ID to delete.
        """
        model = self.db.get(PostagemModel, postagem_id)
        if model is None:
            logger.debug("Postagem %s not found, nothing to delete", postagem_id)
            return
        self.db.delete(model)
        self.db.commit()
        logger.info("Deleted postagem %s", postagem_id)

    def _preencher(self, model: PostagemModel, dados: PostagemBase) -> None:
        tema = None
        if dados.tema is not None:
            tema = self.db.get(TemaModel, dados.tema.id)
            if tema is None:
                raise TemaNotFoundError(dados.tema.id)

        usuario = None
        if dados.usuario is not None:
            usuario = self.db.get(UsuarioModel, dados.usuario.id)
            if usuario is None:
                raise UsuarioNotFoundError(dados.usuario.id)

        model.titulo = dados.titulo
        model.texto = dados.texto
        model.tema = tema
        model.usuario = usuario
