"""
API Views JSON para clientes, técnicos e login.

Endpoints:
- GET    /clientes          - Listar clientes (cliente comum vê apenas a si)
- POST   /clientes          - Cadastrar cliente (ADMIN)
- GET    /clientes/<id>     - Obter cliente (ADMIN, TECNICO ou o próprio)
- PUT    /clientes/<id>     - Atualizar cliente (ADMIN)
- DELETE /clientes/<id>     - Excluir cliente (ADMIN)
- GET    /tecnicos          - Listar técnicos
- POST   /tecnicos          - Cadastrar técnico
- GET    /tecnicos/<id>     - Obter técnico
- PUT    /tecnicos/<id>     - Atualizar técnico (ADMIN)
- DELETE /tecnicos/<id>     - Excluir técnico (ADMIN)
- POST   /login             - Autenticar (token no header Authorization)
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.core.pessoas.dtos import PessoaInputDTO
from src.core.shared.exceptions import AuthenticationError, ValidationError

from ..shared.api import BaseAPIView

logger = logging.getLogger(__name__)


class _PessoaListView(BaseAPIView):
    """Listagem e criação (clientes ou técnicos, conforme service_name)."""

    service_name: str = ""
    location: str = ""

    def get(self, request: HttpRequest) -> JsonResponse:
        service = self.get_service(self.service_name)
        pessoas = service.listar(self.principal)
        return self.ok([p.to_dict() for p in pessoas])

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "nome": "string",
            "cpf": "string",
            "email": "string",
            "senha": "string",
            "perfis": ["ADMIN"] (opcional)
        }
        """
        data = self.parse_body(request)
        service = self.get_service(self.service_name)

        output = service.criar(self.principal, PessoaInputDTO.from_dict(data))

        logger.info(f"API: {self.location} criado: {output.id}")
        return self.created(request, output.to_dict(), f"/{self.location}/{output.id}")


class _PessoaDetailView(BaseAPIView):
    """Leitura, atualização e exclusão de uma pessoa."""

    service_name: str = ""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        output = self.get_service(self.service_name).obter(self.principal, pk)
        return self.ok(output.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service(self.service_name).atualizar(
            self.principal, pk, PessoaInputDTO.from_dict(data)
        )
        return self.ok(output.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service(self.service_name).excluir(self.principal, pk)
        return self.no_content()


class ClienteAPIListView(_PessoaListView):
    service_name = 'cliente_service'
    location = 'clientes'


class ClienteAPIDetailView(_PessoaDetailView):
    service_name = 'cliente_service'


class TecnicoAPIListView(_PessoaListView):
    service_name = 'tecnico_service'
    location = 'tecnicos'


class TecnicoAPIDetailView(_PessoaDetailView):
    service_name = 'tecnico_service'


class LoginAPIView(BaseAPIView):
    """
    POST /login

    Body JSON: {"email": "...", "senha": "..."}

    Sucesso: 200 com header 'Authorization: Bearer <token>' (exposto
    via access-control-expose-headers) e o token também no corpo.
    Falha: 401 "Email ou senha inválidos".
    """

    def get_principal(self, request: HttpRequest):
        return None

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)
        except ValidationError as e:
            raise AuthenticationError("Email ou senha inválidos") from e

        service = self.get_service('autenticacao_service')
        token = service.autenticar(data.get("email"), data.get("senha"))

        response = JsonResponse({"token": token, "tipo": "Bearer"})
        response["Authorization"] = f"Bearer {token}"
        response["access-control-expose-headers"] = "Authorization"
        return response
