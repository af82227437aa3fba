"""
API Views JSON para o domínio de Chamados.

Endpoints:
- GET    /chamados          - Listar chamados visíveis ao usuário
- POST   /chamados          - Abrir chamado
- GET    /chamados/<id>     - Obter chamado (ADMIN, TECNICO ou cliente dono)
- PUT    /chamados/<id>     - Atualizar chamado (TECNICO ou ADMIN)
- DELETE /chamados/<id>     - Excluir chamado (ADMIN)

Formato:
    {
        "id": 1,
        "data_abertura": "19/10/2026",
        "data_fechamento": null,
        "prioridade": "MEDIA",
        "status": "ANDAMENTO",
        "titulo": "Erro ao acessar VPN",
        "observacoes": "...",
        "tecnico": 2,
        "cliente": 6,
        "nome_tecnico": "Bill Gates",
        "nome_cliente": "Linus Torvalds"
    }
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.core.chamados.dtos import ChamadoInputDTO

from ..shared.api import BaseAPIView

logger = logging.getLogger(__name__)


class ChamadoAPIListView(BaseAPIView):
    """
    API para listar e abrir chamados.

    GET /chamados - Lista chamados (filtrados pelo perfil)
    POST /chamados - Abre chamado
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        chamados = self.get_service('chamado_service').listar(self.principal)
        return self.ok([c.to_dict() for c in chamados])

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "titulo": "string (obrigatório)",
            "prioridade": "BAIXA|MEDIA|ALTA ou 0|1|2 (obrigatório)",
            "status": "ABERTO|ANDAMENTO|ENCERRADO ou 0|1|2 (opcional)",
            "tecnico": id (obrigatório),
            "cliente": id (obrigatório),
            "observacoes": "string (opcional)"
        }
        """
        data = self.parse_body(request)

        output = self.get_service('chamado_service').criar(
            self.principal, ChamadoInputDTO.from_dict(data)
        )

        logger.info(f"API: Chamado criado: {output.id}")
        return self.created(request, output.to_dict(), f"/chamados/{output.id}")


class ChamadoAPIDetailView(BaseAPIView):
    """
    API para operações em chamado específico.

    GET /chamados/<id> - Obter chamado
    PUT /chamados/<id> - Atualizar chamado (substituição completa)
    DELETE /chamados/<id> - Excluir chamado
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        output = self.get_service('chamado_service').obter(self.principal, pk)
        return self.ok(output.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        data = self.parse_body(request)

        output = self.get_service('chamado_service').atualizar(
            self.principal, pk, ChamadoInputDTO.from_dict(data)
        )
        return self.ok(output.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('chamado_service').excluir(self.principal, pk)
        return self.no_content()
