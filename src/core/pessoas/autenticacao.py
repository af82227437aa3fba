"""
Autenticação de pessoas.

Login por e-mail + senha, emitindo um token assinado. O token é
stateless: a cada requisição o principal é reconstruído a partir do
e-mail contido nele, recarregando a pessoa para que perfis
alterados/removidos tenham efeito imediato.
"""

import logging
from typing import Optional

from src.core.shared.exceptions import AuthenticationError
from src.core.shared.interfaces import PasswordHasher, TokenService
from src.core.shared.principal import Principal

from .ports import PessoaRepository

logger = logging.getLogger(__name__)

MENSAGEM_CREDENCIAIS_INVALIDAS = "Email ou senha inválidos"


class AutenticacaoService:
    """
    Use Case: login e resolução do principal.

    Example:
        service = AutenticacaoService(pessoa_repo, hasher, token_service)
        token = service.autenticar("admin@mail.com", "123")
        principal = service.resolver_principal(token)
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.pessoa_repo = pessoa_repo
        self.hasher = hasher
        self.token_service = token_service

    def autenticar(self, email: str, senha: str) -> str:
        """
        Valida credenciais e emite token.

        Args:
            email: E-mail de login
            senha: Senha em texto puro

        Returns:
            Token assinado (sub = e-mail)

        Raises:
            AuthenticationError: E-mail inexistente ou senha incorreta
        """
        if not isinstance(email, str) or not isinstance(senha, str):
            raise AuthenticationError(MENSAGEM_CREDENCIAIS_INVALIDAS)

        pessoa = self.pessoa_repo.get_by_email(email.strip())

        if pessoa is None or not senha or not self.hasher.verify(senha, pessoa.senha):
            logger.info(f"Falha de login para {email!r}")
            raise AuthenticationError(MENSAGEM_CREDENCIAIS_INVALIDAS)

        token = self.token_service.issue(
            pessoa.email,
            {
                "id": pessoa.id,
                "perfis": sorted(p.name for p in pessoa.perfis),
            },
        )
        logger.info(f"Login de {pessoa.email} ({pessoa.tipo.value} {pessoa.id})")
        return token

    def resolver_principal(self, token: Optional[str]) -> Optional[Principal]:
        """
        Reconstrói o principal a partir do token.

        Returns:
            Principal com os perfis atuais, ou None se o token for
            inválido/expirado ou a pessoa não existir mais
        """
        if not token:
            return None

        claims = self.token_service.verify(token)
        if not claims or not claims.get("sub"):
            return None

        pessoa = self.pessoa_repo.get_by_email(claims["sub"])
        if pessoa is None:
            logger.debug(f"Token para e-mail inexistente: {claims['sub']}")
            return None

        return pessoa.to_principal()
