"""Post routes.

This module handles HTTP endpoints for post CRUD and title search.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.routes.usuario import get_current_usuario
from core.dependencies import PostagemManagerDep
from core.exceptions import (
    PostagemNotFoundError,
    TemaNotFoundError,
    UsuarioNotFoundError,
)
from models.postagem import PostagemModel
from schemas.postagem import Postagem, PostagemCreate, PostagemUpdate

router = APIRouter(
    prefix="/postagens",
    tags=["Postagem"],
    dependencies=[Depends(get_current_usuario)],
)


@router.get("", response_model=List[Postagem], summary="Listar postagens")
def get_all(postagem_manager: PostagemManagerDep) -> List[PostagemModel]:
    return postagem_manager.listar()


@router.get("/{postagem_id}", response_model=Postagem, summary="Buscar postagem por id")
def get_by_id(postagem_id: int, postagem_manager: PostagemManagerDep) -> PostagemModel:
    try:
        return postagem_manager.buscar_por_id(postagem_id)
    except PostagemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/titulo/{titulo}",
    response_model=List[Postagem],
    summary="Buscar postagens por título",
)
def get_by_titulo(titulo: str, postagem_manager: PostagemManagerDep) -> List[PostagemModel]:
    """List posts whose title contains `titulo`, ignoring case."""
    return postagem_manager.buscar_por_titulo(titulo)


@router.post(
    "",
    response_model=Postagem,
    status_code=status.HTTP_201_CREATED,
    summary="Criar postagem",
)
def post(req: PostagemCreate, postagem_manager: PostagemManagerDep) -> PostagemModel:
    """Create a post.

    Args:
        req: Post payload; `tema` and `usuario` reference existing records by id.
        postagem_manager: Injected PostagemManager instance.

    Returns:
        The created post with its id and timestamp.

    Raises:
        HTTPException: 400 if the referenced topic or author does not exist.
    """
    try:
        return postagem_manager.criar(req)
    except (TemaNotFoundError, UsuarioNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("", response_model=Postagem, summary="Atualizar postagem")
def put(req: PostagemUpdate, postagem_manager: PostagemManagerDep) -> PostagemModel:
    """Overwrite a post; a post that does not exist yet is created with the given id.

    Raises:
        HTTPException: 400 if the referenced topic or author does not exist.
    """
    try:
        return postagem_manager.atualizar(req)
    except (TemaNotFoundError, UsuarioNotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{postagem_id}", response_class=Response, summary="Excluir postagem")
def delete(postagem_id: int, postagem_manager: PostagemManagerDep) -> Response:
    postagem_manager.deletar(postagem_id)
    return Response(status_code=status.HTTP_200_OK)
