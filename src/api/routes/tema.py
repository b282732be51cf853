"""Topic routes."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.routes.usuario import get_current_usuario
from core.dependencies import TemaManagerDep
from core.exceptions import TemaNotFoundError
from models.tema import TemaModel
from schemas.tema import Tema, TemaCreate, TemaUpdate

router = APIRouter(
    prefix="/temas",
    tags=["Tema"],
    dependencies=[Depends(get_current_usuario)],
)


@router.get("", response_model=List[Tema], summary="Listar temas")
def get_all(tema_manager: TemaManagerDep) -> List[TemaModel]:
    return tema_manager.listar()


@router.get("/{tema_id}", response_model=Tema, summary="Buscar tema por id")
def get_by_id(tema_id: int, tema_manager: TemaManagerDep) -> TemaModel:
    try:
        return tema_manager.buscar_por_id(tema_id)
    except TemaNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "/descricao/{descricao}",
    response_model=List[Tema],
    summary="Buscar temas por descrição",
)
def get_by_descricao(descricao: str, tema_manager: TemaManagerDep) -> List[TemaModel]:
    return tema_manager.buscar_por_descricao(descricao)


@router.post(
    "",
    response_model=Tema,
    status_code=status.HTTP_201_CREATED,
    summary="Criar tema",
)
def post(req: TemaCreate, tema_manager: TemaManagerDep) -> TemaModel:
    return tema_manager.criar(req)


@router.put("", response_model=Tema, summary="Atualizar tema")
def put(req: TemaUpdate, tema_manager: TemaManagerDep) -> TemaModel:
    return tema_manager.atualizar(req)


@router.delete("/{tema_id}", response_class=Response, summary="Excluir tema")
def delete(tema_id: int, tema_manager: TemaManagerDep) -> Response:
    """Delete a topic together with its posts. Unknown ids are ignored."""
    tema_manager.deletar(tema_id)
    return Response(status_code=status.HTTP_200_OK)
