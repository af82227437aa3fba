"""
Adapters de segurança.

- DjangoPasswordHasher: hash de senha via django.contrib.auth.hashers
  (algoritmo definido por PASSWORD_HASHERS)
- JoseTokenService: token JWT assinado (HS256) via python-jose
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from django.contrib.auth.hashers import check_password, make_password
from jose import JWTError, jwt

from src.core.shared.interfaces import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


class DjangoPasswordHasher(PasswordHasher):
    """Delegação para os hashers configurados no Django."""

    def hash(self, senha: str) -> str:
        return make_password(senha)

    def verify(self, senha: str, senha_hash: str) -> bool:
        if not senha_hash:
            return False
        return check_password(senha, senha_hash)


class JoseTokenService(TokenService):
    """
    Tokens JWT de acesso.

    Claims:
        sub: e-mail da pessoa
        id, perfis: informativos (o principal é recarregado do banco)
        type: "access"
        iat/exp: emissão e expiração (epoch)

    Example:
        tokens = JoseTokenService(secret="...", expiration_minutes=60)
        token = tokens.issue("admin@mail.com", {"id": 1, "perfis": ["ADMIN"]})
        claims = tokens.verify(token)
    """

    TOKEN_TYPE = "access"

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 60,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = int(expiration_minutes)

    def issue(self, subject: str, claims: Optional[Dict[str, Any]] = None) -> str:
        now = datetime.now(timezone.utc)
        exp = now + timedelta(minutes=self.expiration_minutes)

        payload = dict(claims or {})
        payload.update({
            "sub": subject,
            "type": self.TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        })
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            data = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Token rejeitado: {e}")
            return None

        if data.get("type") != self.TOKEN_TYPE or "sub" not in data:
            logger.debug("Token com payload inválido")
            return None
        return data
