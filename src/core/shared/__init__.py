"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Principal (usuário autenticado) e Perfis
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConflictError,
    AuthorizationError,
    AuthenticationError,
)
from .principal import Perfil, Principal
from .interfaces import UnitOfWork, PasswordHasher, TokenService

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "AuthorizationError",
    "AuthenticationError",
    "Perfil",
    "Principal",
    "UnitOfWork",
    "PasswordHasher",
    "TokenService",
]
