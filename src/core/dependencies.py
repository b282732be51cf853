"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes.
Every manager is built around a request-scoped DB session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import postagem_manager
from utils import tema_manager
from utils import usuario_manager


def get_postagem_manager(db: Session = Depends(get_db)) -> postagem_manager.PostagemManager:
    """Get PostagemManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        PostagemManager instance.
    """
    return postagem_manager.PostagemManager(db)


def get_tema_manager(db: Session = Depends(get_db)) -> tema_manager.TemaManager:
    """Get TemaManager instance with request-scoped DB session."""
    return tema_manager.TemaManager(db)


def get_usuario_manager(db: Session = Depends(get_db)) -> usuario_manager.UsuarioManager:
    """Get UsuarioManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        UsuarioManager instance.
    """
    return usuario_manager.UsuarioManager(db)


# Type aliases for dependency injection
PostagemManagerDep = Annotated[
    postagem_manager.PostagemManager, Depends(get_postagem_manager)
]
TemaManagerDep = Annotated[
    tema_manager.TemaManager, Depends(get_tema_manager)
]
UsuarioManagerDep = Annotated[
    usuario_manager.UsuarioManager, Depends(get_usuario_manager)
]
