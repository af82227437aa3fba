"""
Entidades do Domínio de Chamados.

Entidades:
- ChamadoEntity: chamado de suporte aberto por um cliente e atendido por um técnico
- ChamadoStatus: ABERTO | ANDAMENTO | ENCERRADO
- ChamadoPrioridade: BAIXA | MEDIA | ALTA

Regras de Negócio Encapsuladas:
- Título obrigatório e limitado a TITULO_MAX_LENGTH caracteres
- Data de fechamento acompanha o status (máquina de estados)
- Nenhuma transição é proibida: um chamado encerrado pode voltar a andamento
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Optional

from src.core.shared.exceptions import ValidationError


class _EnumComCodigo(Enum):
    """Enum serializado pelo nome, que também aceita o código numérico."""

    @classmethod
    def rotulo(cls) -> str:
        return cls.__name__

    @classmethod
    def from_value(cls, value):
        """
        Converte nome ("ALTA") ou código (2) no enum.

        Raises:
            ValueError: Se valor inválido
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            for membro in cls:
                if membro.value == value:
                    return membro
        else:
            texto = str(value).strip().upper()
            if texto.isdigit():
                return cls.from_value(int(texto))
            try:
                return cls[texto]
            except KeyError:
                pass

        raise ValueError(f"{cls.rotulo()} inválido(a): {value}")


class ChamadoStatus(_EnumComCodigo):
    """
    Estados de um chamado.

    Fluxo:
        ABERTO → ANDAMENTO → ENCERRADO
        ENCERRADO → ANDAMENTO/ABERTO (reabrir)
    """

    ABERTO = 0
    ANDAMENTO = 1
    ENCERRADO = 2

    @classmethod
    def rotulo(cls) -> str:
        return "Status"


class ChamadoPrioridade(_EnumComCodigo):
    BAIXA = 0
    MEDIA = 1
    ALTA = 2

    @classmethod
    def rotulo(cls) -> str:
        return "Prioridade"


@dataclass
class ChamadoEntity:
    """
    Entidade de Domínio: Chamado.

    Invariantes:
    - data_abertura é definida na criação e nunca muda
    - data_fechamento != None se e somente se o status entrou em
      ENCERRADO e não saiu dele desde então
    - tecnico_id e cliente_id apontam para pessoas existentes
      (garantido pelo service)

    Attributes:
        id: Identificador numérico (None até ser persistido)
        titulo: Título
        observacoes: Texto livre opcional
        prioridade: BAIXA, MEDIA ou ALTA
        status: ABERTO, ANDAMENTO ou ENCERRADO
        tecnico_id: Técnico responsável
        cliente_id: Cliente que abriu o chamado
        data_abertura: Data de abertura
        data_fechamento: Data de encerramento (None se não encerrado)

    Example:
        chamado = ChamadoEntity.criar(
            titulo="Erro ao acessar VPN",
            prioridade=ChamadoPrioridade.MEDIA,
            tecnico_id=2,
            cliente_id=6,
        )
        chamado.alterar_status(ChamadoStatus.ENCERRADO)
        assert chamado.data_fechamento == date.today()
    """

    id: Optional[int] = None
    titulo: str = ""
    observacoes: Optional[str] = None
    prioridade: ChamadoPrioridade = ChamadoPrioridade.MEDIA
    status: ChamadoStatus = ChamadoStatus.ABERTO
    tecnico_id: Optional[int] = None
    cliente_id: Optional[int] = None
    data_abertura: date = field(default_factory=date.today)
    data_fechamento: Optional[date] = None

    TITULO_MAX_LENGTH: ClassVar[int] = 200

    @classmethod
    def criar(
        cls,
        titulo: str,
        prioridade: ChamadoPrioridade,
        tecnico_id: int,
        cliente_id: int,
        status: Optional[ChamadoStatus] = None,
        observacoes: Optional[str] = None,
        hoje: Optional[date] = None,
    ) -> "ChamadoEntity":
        """
        Factory method para abrir chamado.

        Um chamado criado já como ENCERRADO recebe data de
        fechamento igual à data de abertura.

        Raises:
            ValidationError: Se título ausente ou longo demais
        """
        cls.validar_titulo(titulo)
        hoje = hoje or date.today()

        chamado = cls(
            titulo=titulo.strip(),
            observacoes=observacoes,
            prioridade=prioridade,
            tecnico_id=tecnico_id,
            cliente_id=cliente_id,
            data_abertura=hoje,
        )
        if status is not None:
            chamado.alterar_status(status, hoje=hoje)
        return chamado

    @classmethod
    def validar_titulo(cls, titulo: str) -> None:
        if not titulo or not titulo.strip():
            raise ValidationError("O campo TITULO é requerido", field="titulo")

        if len(titulo.strip()) > cls.TITULO_MAX_LENGTH:
            raise ValidationError(
                f"Título deve ter no máximo {cls.TITULO_MAX_LENGTH} caracteres",
                field="titulo",
            )

    def alterar_status(self, novo_status: Optional[ChamadoStatus], hoje: Optional[date] = None) -> None:
        """
        Máquina de estados da data de fechamento.

        - Status ausente ou igual ao atual: nada muda
        - Entrando em ENCERRADO: data_fechamento = hoje
        - Saindo de ENCERRADO: data_fechamento = None
        - Demais transições: apenas o status muda
        """
        if novo_status is None or novo_status is self.status:
            return

        if novo_status is ChamadoStatus.ENCERRADO:
            self.data_fechamento = hoje or date.today()
        elif self.status is ChamadoStatus.ENCERRADO:
            self.data_fechamento = None

        self.status = novo_status

    def atualizar(
        self,
        titulo: str,
        prioridade: ChamadoPrioridade,
        tecnico_id: int,
        cliente_id: int,
        status: Optional[ChamadoStatus] = None,
        observacoes: Optional[str] = None,
        hoje: Optional[date] = None,
    ) -> None:
        """Substitui todos os campos editáveis (data_abertura é preservada)."""
        self.validar_titulo(titulo)
        self.titulo = titulo.strip()
        self.prioridade = prioridade
        self.tecnico_id = tecnico_id
        self.cliente_id = cliente_id
        self.observacoes = observacoes
        self.alterar_status(status, hoje=hoje)

    @property
    def esta_encerrado(self) -> bool:
        return self.status is ChamadoStatus.ENCERRADO

    def __str__(self) -> str:
        return f"Chamado #{self.id}: {self.titulo} [{self.status.name}]"
