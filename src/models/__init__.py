from .base import Base
from .tema import TemaModel
from .usuario import UsuarioModel
from .postagem import PostagemModel

__all__ = ["Base", "TemaModel", "UsuarioModel", "PostagemModel"]
