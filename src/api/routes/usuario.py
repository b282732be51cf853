"""User routes.

This module handles HTTP endpoints for user registration, login and
management, and provides the HTTP Basic guard used by the other routers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

import config
from core.dependencies import UsuarioManagerDep
from core.exceptions import (
    InvalidCredentialsError,
    UsuarioAlreadyExistsError,
    UsuarioNotFoundError,
)
from models.usuario import UsuarioModel
from schemas.usuario import Usuario, UsuarioCreate, UsuarioLogin, UsuarioUpdate

router = APIRouter(prefix="/usuarios", tags=["Usuario"])

# Missing credentials are handled by get_current_usuario
security = HTTPBasic(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Basic"},
    )


def get_current_usuario(
    usuario_manager: UsuarioManagerDep,
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
) -> Optional[UsuarioModel]:
    """Authenticate the request from its Authorization: Basic header.

    Args:
        usuario_manager: Injected UsuarioManager instance.
        credentials: Decoded Basic credentials, if any were sent.

    Returns:
        The authenticated UsuarioModel, or None when authentication is
        disabled and no credentials were sent.

    Raises:
        HTTPException: If credentials are missing or invalid.
    """
    if credentials is None:
        if not config.REQUIRE_AUTH:
            return None
        raise _unauthorized("Not authenticated")

    try:
        return usuario_manager.verificar_credenciais(
            credentials.username, credentials.password
        )
    except InvalidCredentialsError:
        raise _unauthorized("Invalid authentication credentials")


@router.get(
    "/all",
    response_model=List[Usuario],
    summary="Listar usuários",
    dependencies=[Depends(get_current_usuario)],
)
def get_all(usuario_manager: UsuarioManagerDep) -> List[UsuarioModel]:
    return usuario_manager.listar_usuarios()


@router.get(
    "/{usuario_id}",
    response_model=Usuario,
    summary="Buscar usuário por id",
    dependencies=[Depends(get_current_usuario)],
)
def get_by_id(usuario_id: int, usuario_manager: UsuarioManagerDep) -> UsuarioModel:
    try:
        return usuario_manager.buscar_por_id(usuario_id)
    except UsuarioNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/logar", response_model=UsuarioLogin, summary="Autenticar usuário")
def logar(req: UsuarioLogin, usuario_manager: UsuarioManagerDep) -> UsuarioLogin:
    """Login with username and password.

    Args:
        req: Login request with username and password.
        usuario_manager: Injected UsuarioManager instance.

    Returns:
        The login request with the user's id, name, stored password hash
        and Basic token.

    Raises:
        HTTPException: 401 if the credentials do not match a user.
    """
    try:
        return usuario_manager.autenticar_usuario(req)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )


@router.post(
    "/cadastrar",
    response_model=Usuario,
    status_code=status.HTTP_201_CREATED,
    summary="Cadastrar usuário",
)
def cadastrar(req: UsuarioCreate, usuario_manager: UsuarioManagerDep) -> UsuarioModel:
    """Register a new user.

    Args:
        req: Registration request with name, username and plaintext password.
        usuario_manager: Injected UsuarioManager instance.

    Returns:
        The stored user, with the password hash instead of the plaintext.

    Raises:
        HTTPException: 409 if the username is already taken.
    """
    try:
        return usuario_manager.cadastrar_usuario(req)
    except UsuarioAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put(
    "/atualizar",
    response_model=Usuario,
    summary="Atualizar usuário",
    dependencies=[Depends(get_current_usuario)],
)
def atualizar(req: UsuarioUpdate, usuario_manager: UsuarioManagerDep) -> UsuarioModel:
    try:
        return usuario_manager.atualizar_usuario(req)
    except UsuarioNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UsuarioAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
