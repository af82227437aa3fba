"""
Base para as API Views JSON.

Responsabilidades:
- Resolver o Principal a partir do header Authorization (uma vez por request)
- Parsear corpo JSON
- Converter exceções de domínio em respostas HTTP padronizadas

Formato de erro:
    {
        "timestamp": 1700000000000,
        "status": 404,
        "error": "Não Encontrado",
        "message": "Chamado não encontrado! ID: 9",
        "path": "/chamados/9"
    }
"""

import json
import logging
import time
from typing import Any, Dict, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.config.container import get_container
from src.core.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.principal import Principal

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# (tipo de exceção, status HTTP, rótulo) - primeira correspondência vence
MAPA_DE_ERROS = [
    (ValidationError, 400, "Erro de Validação"),
    (ConflictError, 400, "Erro de Validação"),
    (EntityNotFoundError, 404, "Não Encontrado"),
    (AuthorizationError, 403, "Acesso Negado"),
    (AuthenticationError, 401, "Não autorizado"),
]


def error_response(request: HttpRequest, status: int, error: str, message: str) -> JsonResponse:
    """Resposta de erro no formato padrão da API."""
    return JsonResponse(
        {
            "timestamp": int(time.time() * 1000),
            "status": status,
            "error": error,
            "message": message,
            "path": request.path,
        },
        status=status,
    )


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValidationError("Corpo da requisição deve ser um objeto JSON")
    return data


def extrair_token(request: HttpRequest) -> Optional[str]:
    """Token do header 'Authorization: Bearer <token>' (None se ausente)."""
    header = request.META.get("HTTP_AUTHORIZATION", "")
    if not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Subclasses implementam handlers que recebem o principal já
    resolvido em `self.principal` e podem lançar exceções de domínio
    livremente: dispatch() converte tudo via handle_exception().
    """

    principal: Optional[Principal] = None

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def get_principal(self, request: HttpRequest) -> Optional[Principal]:
        """Resolve o principal a partir do token (None se anônimo/inválido)."""
        token = extrair_token(request)
        if token is None:
            return None
        return self.get_service('autenticacao_service').resolver_principal(token)

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        try:
            self.principal = self.get_principal(request)
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(request, e)

    def handle_exception(self, request: HttpRequest, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Exceções de domínio viram 4xx; qualquer outra vira 500 com
        mensagem genérica (detalhes apenas no log).
        """
        for tipo, status, rotulo in MAPA_DE_ERROS:
            if isinstance(e, tipo):
                logger.info(f"{request.method} {request.path} → {status}: {e.message}")
                return error_response(request, status, rotulo, e.message)

        if isinstance(e, DomainException):
            return error_response(request, 400, "Erro de Validação", e.message)

        logger.exception(f"Erro inesperado na API: {e}")
        return error_response(
            request,
            500,
            "Erro Interno do Servidor",
            "Ocorreu um erro inesperado. Tente novamente mais tarde.",
        )

    # -------------------------------------------------------------------------
    # Respostas
    # -------------------------------------------------------------------------

    @staticmethod
    def ok(data: Any, status: int = 200) -> JsonResponse:
        return JsonResponse(data, status=status, safe=False)

    @staticmethod
    def created(request: HttpRequest, data: Dict, location: str) -> JsonResponse:
        """201 com header Location apontando para o recurso criado."""
        response = JsonResponse(data, status=201)
        response["Location"] = request.build_absolute_uri(location)
        return response

    @staticmethod
    def no_content() -> HttpResponse:
        return HttpResponse(status=204)
