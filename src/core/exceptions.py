"""Custom exception classes for the Blog Pessoal API.

Managers raise these instead of returning empty results, so routes can map
each failure to an HTTP status and store errors are never mistaken for
"not found".
"""


class BlogPessoalError(Exception):
    """Base exception for all Blog Pessoal errors."""

    pass


class PostagemNotFoundError(BlogPessoalError):
    """Raised when a requested post cannot be found."""

    def __init__(self, postagem_id: int):
        """Initialize the exception.

        Args:
            postagem_id: The ID of the post that was not found.
        """
        self.postagem_id = postagem_id
        super().__init__(f"Postagem '{postagem_id}' not found")


class TemaNotFoundError(BlogPessoalError):
    """Raised when a requested topic cannot be found."""

    def __init__(self, tema_id: int):
        """Initialize the exception.

        Args:
            tema_id: The ID of the topic that was not found.
        """
        self.tema_id = tema_id
        super().__init__(f"Tema '{tema_id}' not found")


class UsuarioNotFoundError(BlogPessoalError):
    """Raised when a requested user cannot be found."""

    def __init__(self, usuario_id: int):
        self.usuario_id = usuario_id
        super().__init__(f"Usuario '{usuario_id}' not found")


class UsuarioAlreadyExistsError(BlogPessoalError):
    """Raised when a username is already taken."""

    def __init__(self, usuario: str):
        self.usuario = usuario
        super().__init__(f"Usuario '{usuario}' already exists")


class InvalidCredentialsError(BlogPessoalError):
    """Raised when a username/password pair does not authenticate."""

    pass
