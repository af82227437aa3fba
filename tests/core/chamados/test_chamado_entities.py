"""
Testes Unitários para Entidades do Domínio de Chamados.

Testa a máquina de estados da data de fechamento e a conversão de
prioridade/status, sem dependências externas.
"""

from datetime import date

import pytest

from src.core.chamados.dtos import ChamadoInputDTO, ChamadoOutputDTO
from src.core.chamados.entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus
from src.core.shared.exceptions import ValidationError


ABERTURA = date(2024, 3, 1)
FECHAMENTO = date(2024, 3, 10)


@pytest.fixture
def chamado():
    return ChamadoEntity.criar(
        titulo="Impressora não imprime",
        prioridade=ChamadoPrioridade.ALTA,
        tecnico_id=2,
        cliente_id=6,
        hoje=ABERTURA,
    )


class TestCriacao:
    def test_padrao_aberto_sem_fechamento(self, chamado):
        assert chamado.id is None
        assert chamado.status is ChamadoStatus.ABERTO
        assert chamado.data_abertura == ABERTURA
        assert chamado.data_fechamento is None

    def test_criado_encerrado_fecha_no_mesmo_dia(self):
        chamado = ChamadoEntity.criar(
            titulo="Atualização de antivírus",
            prioridade=ChamadoPrioridade.BAIXA,
            tecnico_id=2,
            cliente_id=6,
            status=ChamadoStatus.ENCERRADO,
            hoje=ABERTURA,
        )
        assert chamado.data_fechamento == ABERTURA

    @pytest.mark.parametrize("titulo", ["", "   ", None])
    def test_titulo_obrigatorio(self, titulo):
        with pytest.raises(ValidationError) as exc:
            ChamadoEntity.criar(titulo=titulo, prioridade=ChamadoPrioridade.BAIXA, tecnico_id=2, cliente_id=6)
        assert exc.value.message == "O campo TITULO é requerido"

    def test_titulo_muito_longo(self):
        with pytest.raises(ValidationError) as exc:
            ChamadoEntity.criar(
                titulo="x" * (ChamadoEntity.TITULO_MAX_LENGTH + 1),
                prioridade=ChamadoPrioridade.BAIXA,
                tecnico_id=2,
                cliente_id=6,
            )
        assert exc.value.field == "titulo"
        assert exc.value.message == "Título deve ter no máximo 200 caracteres"

    def test_atualizar_com_titulo_muito_longo(self, chamado):
        with pytest.raises(ValidationError):
            chamado.atualizar(
                titulo="x" * 500,
                prioridade=ChamadoPrioridade.BAIXA,
                tecnico_id=2,
                cliente_id=6,
            )
        assert chamado.titulo == "Impressora não imprime"


class TestMaquinaDeEstados:
    def test_aberto_para_andamento_nao_fecha(self, chamado):
        chamado.alterar_status(ChamadoStatus.ANDAMENTO, hoje=FECHAMENTO)

        assert chamado.status is ChamadoStatus.ANDAMENTO
        assert chamado.data_fechamento is None

    def test_encerrar_define_data(self, chamado):
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=FECHAMENTO)

        assert chamado.esta_encerrado
        assert chamado.data_fechamento == FECHAMENTO

    def test_reencerrar_preserva_primeira_data(self, chamado):
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=FECHAMENTO)
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=date(2024, 4, 1))

        assert chamado.data_fechamento == FECHAMENTO

    def test_reabrir_limpa_data(self, chamado):
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=FECHAMENTO)
        chamado.alterar_status(ChamadoStatus.ANDAMENTO)

        assert chamado.status is ChamadoStatus.ANDAMENTO
        assert chamado.data_fechamento is None

    def test_status_ausente_nao_muda_nada(self, chamado):
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=FECHAMENTO)
        chamado.alterar_status(None)

        assert chamado.status is ChamadoStatus.ENCERRADO
        assert chamado.data_fechamento == FECHAMENTO

    def test_atualizar_preserva_abertura(self, chamado):
        chamado.atualizar(
            titulo="Impressora do 2º andar",
            prioridade=ChamadoPrioridade.MEDIA,
            tecnico_id=3,
            cliente_id=6,
            status=ChamadoStatus.ENCERRADO,
            observacoes="toner trocado",
            hoje=FECHAMENTO,
        )

        assert chamado.data_abertura == ABERTURA
        assert chamado.data_fechamento == FECHAMENTO
        assert chamado.tecnico_id == 3
        assert chamado.observacoes == "toner trocado"


class TestConversaoDeEnums:
    @pytest.mark.parametrize("valor,esperado", [
        ("ALTA", ChamadoPrioridade.ALTA),
        ("alta", ChamadoPrioridade.ALTA),
        (0, ChamadoPrioridade.BAIXA),
        ("1", ChamadoPrioridade.MEDIA),
        (ChamadoPrioridade.MEDIA, ChamadoPrioridade.MEDIA),
    ])
    def test_prioridade(self, valor, esperado):
        assert ChamadoPrioridade.from_value(valor) is esperado

    @pytest.mark.parametrize("valor", ["URGENTE", 5, "9"])
    def test_status_invalido(self, valor):
        with pytest.raises(ValueError) as exc:
            ChamadoStatus.from_value(valor)
        assert "Status inválido" in str(exc.value)


class TestDTOs:
    def test_input_from_dict_usa_chaves_tecnico_e_cliente(self):
        dto = ChamadoInputDTO.from_dict({
            "titulo": "Erro ao acessar VPN",
            "prioridade": "MEDIA",
            "tecnico": 2,
            "cliente": 6,
        })

        assert dto.tecnico_id == 2
        assert dto.cliente_id == 6
        assert dto.status is None

    def test_output_serializa_nomes_e_datas(self, chamado):
        chamado.id = 1
        chamado.alterar_status(ChamadoStatus.ENCERRADO, hoje=FECHAMENTO)

        data = ChamadoOutputDTO.from_entity(chamado, "Bill Gates", "Linus Torvalds").to_dict()

        assert data["prioridade"] == "ALTA"
        assert data["status"] == "ENCERRADO"
        assert data["data_abertura"] == "01/03/2024"
        assert data["data_fechamento"] == "10/03/2024"
        assert data["tecnico"] == 2
        assert data["nome_cliente"] == "Linus Torvalds"
