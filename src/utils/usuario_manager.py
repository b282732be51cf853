"""User management utilities.

This module provides user management functionality including user storage,
password hashing, credential verification and Basic token generation.
"""

import base64
import logging
from typing import List, Optional

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import BCRYPT_ROUNDS
from core.exceptions import (
    InvalidCredentialsError,
    UsuarioAlreadyExistsError,
    UsuarioNotFoundError,
)
from models.usuario import UsuarioModel
from schemas.usuario import UsuarioCreate, UsuarioLogin, UsuarioUpdate

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def gerar_token_basic(usuario: str, senha: str) -> str:
    """Build an HTTP Basic credential string.

    The value is "Basic " followed by the base64 of "usuario:senha" encoded
    as ASCII. The space after "Basic" is part of the format.

    Args:
        usuario: Username.
        senha: Plaintext password.

    Returns:
        The token, e.g. "Basic bWFyaWE6MTIzNDU2" for maria/123456.

    Raises:
        UnicodeEncodeError: If the credentials are not ASCII.
    """
    auth = f"{usuario}:{senha}"
    encoded_auth = base64.b64encode(auth.encode("ascii"))
    return "Basic " + encoded_auth.decode("ascii")


class UsuarioManager:
    """Manages user persistence, registration and authentication."""

    def __init__(self, db: Session):
        """Initialize UsuarioManager.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password.

        Returns:
            Hashed password (bcrypt hash string).
        """
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against a bcrypt hash.

        Args:
            plain_password: Plain text password to verify.
            hashed_password: Bcrypt hash string to verify against.

        Returns:
            True if password matches, False otherwise.
        """
        try:
            return bcrypt.checkpw(
                _password_bytes(plain_password), hashed_password.encode("utf-8")
            )
        except ValueError as e:
            # Stored value is not a bcrypt hash
            logger.error("Password verification error: %s", e)
            return False

    def listar_usuarios(self) -> List[UsuarioModel]:
        """List all users.

        Returns:
            List of UsuarioModel instances ordered by id.
        """
        return self.db.query(UsuarioModel).order_by(UsuarioModel.id).all()

    def buscar_por_id(self, usuario_id: int) -> UsuarioModel:
        """Get a user by id.

        Args:
            usuario_id: User ID to look up.

        Returns:
            The UsuarioModel.

        Raises:
            UsuarioNotFoundError: If no user has this id.
        """
        model = self.db.get(UsuarioModel, usuario_id)
        if model is None:
            raise UsuarioNotFoundError(usuario_id)
        return model

    def buscar_por_usuario(self, usuario: str) -> Optional[UsuarioModel]:
        """Get a user by exact username.

        Args:
            usuario: Username to look up.

        Returns:
            UsuarioModel if found, None otherwise.
        """
        return (
            self.db.query(UsuarioModel)
            .filter(UsuarioModel.usuario == usuario)
            .first()
        )

    def cadastrar_usuario(self, dados: UsuarioCreate) -> UsuarioModel:
        """Register a new user.

        Args:
            dados: Registration payload with the plaintext password.

        Returns:
            The stored UsuarioModel, with the bcrypt hash as `senha`.

        Raises:
            UsuarioAlreadyExistsError: If the username already exists.
        """
        if self.buscar_por_usuario(dados.usuario) is not None:
            raise UsuarioAlreadyExistsError(dados.usuario)

        model = UsuarioModel(
            nome=dados.nome,
            usuario=dados.usuario,
            senha=self.hash_password(dados.senha),
            foto=dados.foto,
        )
        self._salvar(model, dados.usuario)
        logger.info("Registered usuario: %s (id=%s)", model.usuario, model.id)
        return model

    def atualizar_usuario(self, dados: UsuarioUpdate) -> UsuarioModel:
        """Overwrite an existing user.

        Args:
            dados: Full user record, including its id and a plaintext password.

        Returns:
            The updated UsuarioModel.

        Raises:
            UsuarioNotFoundError: If no user has this id.
            UsuarioAlreadyExistsError: If the username belongs to another user.
        """
        model = self.buscar_por_id(dados.id)

        existing = self.buscar_por_usuario(dados.usuario)
        if existing is not None and existing.id != dados.id:
            raise UsuarioAlreadyExistsError(dados.usuario)

        model.nome = dados.nome
        model.usuario = dados.usuario
        model.senha = self.hash_password(dados.senha)
        model.foto = dados.foto
        self._salvar(model, dados.usuario)
        logger.info("Updated usuario: %s (id=%s)", model.usuario, model.id)
        return model

    def verificar_credenciais(self, usuario: str, senha: str) -> UsuarioModel:
        """Check a username/password pair.

        Args:
            usuario: Username.
            senha: Plain text password.

        Returns:
            The matching UsuarioModel.

        Raises:
            InvalidCredentialsError: If the user does not exist or the
                password does not match.
        """
        model = self.buscar_por_usuario(usuario)
        if model is None or not self.verify_password(senha, model.senha):
            logger.info("Failed login for usuario: %s", usuario)
            raise InvalidCredentialsError("Invalid username or password")
        return model

    def autenticar_usuario(self, login: UsuarioLogin) -> UsuarioLogin:
        """Authenticate a login attempt and issue its Basic token.

        Args:
            login: Login request with username and plaintext password.

        Returns:
            A copy of the login request carrying the user's id, name, photo,
            stored password hash and Basic token.

        Raises:
            InvalidCredentialsError: If authentication fails.
        """
        model = self.verificar_credenciais(login.usuario, login.senha)
        try:
            token = gerar_token_basic(login.usuario, login.senha)
        except UnicodeEncodeError as e:
            raise InvalidCredentialsError(
                "Credentials must be ASCII to build a Basic token"
            ) from e

        return login.model_copy(
            update={
                "id": model.id,
                "nome": model.nome,
                "foto": model.foto,
                "senha": model.senha,
                "token": token,
            }
        )

    def _salvar(self, model: UsuarioModel, usuario: str) -> None:
        # Two concurrent registrations can both pass the lookup; the unique
        # constraint catches the second one
        try:
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as e:
            self.db.rollback()
            if "usuario" in str(e).lower() or "unique" in str(e).lower():
                raise UsuarioAlreadyExistsError(usuario) from e
            raise
