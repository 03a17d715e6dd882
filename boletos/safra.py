"""Boleto do Banco Safra (422), cobrança registrada - CNAB 400."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import ClassVar

from .campo_livre import montar_campo_livre, obter_layout
from .codigo_barras import montar_codigo_barras
from .digitos import modulo10, normalizar_numero
from .exceptions import CarteiraInvalidaError, DocumentoIncompletoError, EntradaInvalidaError
from .fator import POLITICA_DATA_CORTE, PoliticaFator, calcular_fator_vencimento
from .linha_digitavel import formatar_linha_digitavel

NOSSO_NUMERO_ZERADO = "000000000"
VALOR_MAXIMO_CENTAVOS = 9_999_999_999


class ModalidadeCobranca(str, Enum):
    CONVENCIONAL = "1"  # banco emite o boleto, nosso número = zeros
    DIRETA = "2"  # cliente emite o boleto, nosso número livre

    @property
    def rotulo(self) -> str:
        return "Convencional" if self is ModalidadeCobranca.CONVENCIONAL else "Direta"


def _como_modalidade(valor) -> ModalidadeCobranca:
    if isinstance(valor, ModalidadeCobranca):
        return valor
    texto = str(valor).strip().upper()
    for modalidade in ModalidadeCobranca:
        if texto in (modalidade.value, modalidade.name):
            return modalidade
    raise EntradaInvalidaError(
        f"Modalidade de cobrança inválida: '{valor}'. Use 1 (Convencional) ou 2 (Direta)."
    )


def _como_sequencial(valor) -> int:
    if isinstance(valor, bool):
        raise EntradaInvalidaError(f"Sequencial inválido: {valor!r}.")
    if isinstance(valor, int):
        return valor
    return int(normalizar_numero(valor, "sequencial"))


def _como_valor(valor):
    if valor is None or isinstance(valor, Decimal):
        return valor
    texto = str(valor).strip()
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")
    try:
        return Decimal(texto)
    except InvalidOperation:
        raise EntradaInvalidaError(f"Valor do documento inválido: '{valor}'.") from None


def _como_vencimento(valor):
    if valor is None or isinstance(valor, date):
        return valor.date() if isinstance(valor, datetime) else valor
    texto = str(valor).strip()
    for formato in ("%Y-%m-%d", "%d/%m/%Y"):
        try:
            return datetime.strptime(texto, formato).date()
        except ValueError:
            continue
    raise EntradaInvalidaError(
        f"Data de vencimento inválida: '{valor}'. Use AAAA-MM-DD ou DD/MM/AAAA."
    )


def _exigir_numerico(campo, valor, largura):
    if not isinstance(valor, str) or not valor or not (valor.isascii() and valor.isdigit()):
        raise EntradaInvalidaError(f"{campo}: '{valor}' deve conter apenas dígitos.")
    if len(valor) > largura:
        raise EntradaInvalidaError(
            f"{campo}: '{valor}' tem {len(valor)} dígitos, máximo {largura}."
        )


def _exigir_valor(valor):
    if not isinstance(valor, Decimal) or not valor.is_finite():
        raise EntradaInvalidaError(f"Valor do documento inválido: {valor!r}.")
    if valor < 0:
        raise EntradaInvalidaError(f"Valor do documento negativo: {valor}.")
    if valor * 100 > VALOR_MAXIMO_CENTAVOS:
        raise EntradaInvalidaError(f"Valor do documento {valor} não cabe em 10 dígitos.")
    if valor != valor.quantize(Decimal("0.01")):
        raise EntradaInvalidaError(
            f"Valor do documento {valor} tem mais de duas casas decimais."
        )


@dataclass(frozen=True)
class BoletoSafra:
    """Dados de um boleto Safra.

    A instância nunca muda: os métodos ``com_*`` devolvem um novo boleto com o
    campo alterado e validado. Código de barras, linha digitável e demais
    derivados são recalculados a cada acesso.

    Carteiras:
    - 1 = Cobrança Simples
    - 2 = Cobrança Vinculada
    """

    agencia: str
    conta: str
    conta_dv: str = "0"
    sequencial: int = 0
    carteira: str = "1"
    modalidade: ModalidadeCobranca = ModalidadeCobranca.DIRETA
    valor_documento: Decimal | None = None
    data_vencimento: date | None = None
    politica_fator: PoliticaFator = POLITICA_DATA_CORTE
    layout_campo_livre: str = "sistema"

    codigo_banco: ClassVar[str] = "422"
    moeda: ClassVar[str] = "9"
    tipo_cobranca: ClassVar[str] = "2"
    sufixo_banco: ClassVar[str] = "7"
    carteiras: ClassVar[tuple] = ("1", "2")
    local_pagamento: ClassVar[str] = "Pagável em qualquer Banco até o vencimento"

    def __post_init__(self):
        if self.carteira not in self.carteiras:
            raise CarteiraInvalidaError(
                "Carteira inválida para o Safra. Use 1 (Simples) ou 2 (Vinculada)"
            )
        _exigir_numerico("agencia", self.agencia, 5)
        _exigir_numerico("conta", self.conta, 8)
        _exigir_numerico("conta_dv", self.conta_dv, 1)

        if isinstance(self.sequencial, bool) or not isinstance(self.sequencial, int):
            raise EntradaInvalidaError(f"sequencial deve ser inteiro, recebido {self.sequencial!r}.")
        if not 0 <= self.sequencial <= 999_999_999:
            raise EntradaInvalidaError(
                f"sequencial {self.sequencial} fora do intervalo 0 a 999999999."
            )

        if not isinstance(self.modalidade, ModalidadeCobranca):
            raise EntradaInvalidaError(f"Modalidade de cobrança inválida: {self.modalidade!r}.")

        if self.valor_documento is not None:
            _exigir_valor(self.valor_documento)

        if self.data_vencimento is not None and not isinstance(self.data_vencimento, date):
            raise EntradaInvalidaError(
                f"Data de vencimento deve ser date, recebido {type(self.data_vencimento).__name__}."
            )

        obter_layout(self.layout_campo_livre)

    @classmethod
    def criar(
        cls,
        agencia,
        conta,
        conta_dv="0",
        sequencial=0,
        carteira="1",
        modalidade=ModalidadeCobranca.DIRETA,
        valor_documento=None,
        data_vencimento=None,
        config=None,
    ):
        """Monta um boleto a partir de dados digitados.

        Pontuação em agência, conta e sequencial é descartada; valor e data
        aceitam texto. Com ``config`` a política do fator e o layout do campo
        livre vêm da configuração.
        """
        extras = {}
        if config is not None:
            extras["politica_fator"] = config.politica()
            extras["layout_campo_livre"] = config.layout_campo_livre

        return cls(
            agencia=normalizar_numero(agencia, "agencia"),
            conta=normalizar_numero(conta, "conta"),
            conta_dv=normalizar_numero(conta_dv if conta_dv not in (None, "") else "0", "conta_dv"),
            sequencial=_como_sequencial(sequencial),
            carteira=str(carteira).strip(),
            modalidade=_como_modalidade(modalidade),
            valor_documento=_como_valor(valor_documento),
            data_vencimento=_como_vencimento(data_vencimento),
            **extras,
        )

    def com_carteira(self, carteira):
        return replace(self, carteira=str(carteira).strip())

    def com_agencia(self, agencia):
        return replace(self, agencia=normalizar_numero(agencia, "agencia"))

    def com_conta(self, conta):
        return replace(self, conta=normalizar_numero(conta, "conta"))

    def com_conta_dv(self, conta_dv):
        return replace(self, conta_dv=normalizar_numero(conta_dv, "conta_dv"))

    def com_sequencial(self, sequencial):
        return replace(self, sequencial=_como_sequencial(sequencial))

    def com_modalidade(self, modalidade):
        return replace(self, modalidade=_como_modalidade(modalidade))

    def com_valor(self, valor):
        return replace(self, valor_documento=_como_valor(valor))

    def com_vencimento(self, data_vencimento):
        return replace(self, data_vencimento=_como_vencimento(data_vencimento))

    @property
    def valor_zero_fill(self) -> str:
        if self.valor_documento is None:
            raise DocumentoIncompletoError("Valor do documento não informado.")
        centavos = int(self.valor_documento.quantize(Decimal("0.01")) * 100)
        return f"{centavos:010d}"

    @property
    def fator_vencimento(self) -> str:
        return calcular_fator_vencimento(self.data_vencimento, self.politica_fator)

    @property
    def nosso_numero(self) -> str:
        """
        a) Cobrança Convencional: 000000000
        b) Cobrança Direta: sequencial com 9 dígitos
        """
        if self.modalidade is ModalidadeCobranca.CONVENCIONAL:
            return NOSSO_NUMERO_ZERADO
        return f"{self.sequencial:09d}"

    @property
    def dv_nosso_numero(self) -> str:
        nosso_numero = self.nosso_numero
        if nosso_numero == NOSSO_NUMERO_ZERADO:
            return "0"
        return modulo10(nosso_numero)

    @property
    def campo_livre(self) -> str:
        return montar_campo_livre(
            {
                "agencia": self.agencia,
                "conta": self.conta,
                "conta_dv": self.conta_dv,
                "nosso_numero": self.nosso_numero,
                "tipo_cobranca": self.tipo_cobranca,
                "carteira": self.carteira,
            },
            self.layout_campo_livre,
        )

    @property
    def codigo_barras(self) -> str:
        return montar_codigo_barras(
            self.codigo_banco,
            self.moeda,
            self.fator_vencimento,
            self.valor_zero_fill,
            self.campo_livre,
        )

    @property
    def linha_digitavel(self) -> str:
        return formatar_linha_digitavel(self.codigo_barras)

    @property
    def codigo_banco_com_dv(self) -> str:
        """Código do banco para exibição no cabeçalho do boleto."""
        return f"{self.codigo_banco}-{self.sufixo_banco}"

    def dados_exibicao(self) -> dict:
        return {
            "carteira": self.carteira,
            "modalidade": self.modalidade.rotulo,
            "nosso_numero": self.nosso_numero,
            "nosso_numero_dv": self.dv_nosso_numero,
            "codigo_cliente": f"{self.agencia}/{self.conta}-{self.conta_dv}",
        }
