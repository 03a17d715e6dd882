"""Fator de vencimento.

O fator é a quantidade de dias entre uma data base e o vencimento, mantida
sempre com quatro dígitos (1000 a 9999). Quando a contagem passa de 9999 o
fator recomeça em 1000; por isso a data base é trocada periodicamente.

    Data base original: 07/10/1997 (fator 9999 em 21/02/2025)
    Nova data base:     29/05/2022 (fator 1000 em 22/02/2025)
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .exceptions import DocumentoIncompletoError, EntradaInvalidaError, ConfiguracaoError

logger = logging.getLogger(__name__)

BASE_LEGADA = date(1997, 10, 7)
BASE_NOVA = date(2022, 5, 29)
DATA_CORTE = date(2025, 2, 22)

FATOR_MINIMO = 1000
FATOR_MAXIMO = 9999
CICLO = FATOR_MAXIMO - FATOR_MINIMO + 1


@dataclass(frozen=True)
class PoliticaFator:
    """Regra de escolha da data base.

    Sem ``data_corte`` a política usa sempre ``base_nova``. Com ela, vencimentos
    a partir da data de corte usam ``base_nova`` e os anteriores ``base_legada``.
    """

    nome: str
    base_nova: date = BASE_NOVA
    base_legada: date | None = None
    data_corte: date | None = None

    def data_base(self, vencimento: date) -> date:
        if self.data_corte is None or self.base_legada is None:
            return self.base_nova
        if vencimento >= self.data_corte:
            return self.base_nova
        return self.base_legada


POLITICA_DATA_CORTE = PoliticaFator(
    "data_corte", base_legada=BASE_LEGADA, data_corte=DATA_CORTE
)
POLITICA_BASE_NOVA = PoliticaFator("base_nova")

POLITICAS_FATOR = {
    POLITICA_DATA_CORTE.nome: POLITICA_DATA_CORTE,
    POLITICA_BASE_NOVA.nome: POLITICA_BASE_NOVA,
}


def obter_politica_fator(nome: str) -> PoliticaFator:
    politica = POLITICAS_FATOR.get((nome or "").strip().lower())
    if politica is None:
        raise ConfiguracaoError(
            f"Política de fator de vencimento desconhecida: '{nome}'. "
            f"Use uma de: {', '.join(sorted(POLITICAS_FATOR))}."
        )
    return politica


def como_data(vencimento) -> date:
    if vencimento is None or vencimento == "":
        raise DocumentoIncompletoError("Data de vencimento não informada.")
    if isinstance(vencimento, datetime):
        return vencimento.date()
    if isinstance(vencimento, date):
        return vencimento
    raise EntradaInvalidaError(
        f"Data de vencimento deve ser date, recebido {type(vencimento).__name__}."
    )


def normalizar_fator(dias: int) -> int:
    """
    Encaixa a contagem de dias na janela de quatro dígitos.
    """
    if dias < FATOR_MINIMO:
        dias += FATOR_MINIMO
    if dias > FATOR_MAXIMO:
        dias = FATOR_MINIMO + (dias - FATOR_MINIMO) % CICLO
    return dias


def calcular_fator_vencimento(vencimento, politica=POLITICA_DATA_CORTE) -> str:
    data = como_data(vencimento)
    base = politica.data_base(data)
    dias = (data - base).days
    if dias < 0:
        raise EntradaInvalidaError(
            f"Vencimento {data.strftime('%d/%m/%Y')} anterior à data base "
            f"{base.strftime('%d/%m/%Y')}."
        )

    fator = normalizar_fator(dias)
    logger.debug(
        "Fator de vencimento %04d para %s (base %s, política %s)",
        fator, data.isoformat(), base.isoformat(), politica.nome,
    )
    return f"{fator:04d}"


def data_por_fator(fator, politica=POLITICA_DATA_CORTE, referencia=None):
    """
    Converte um fator de volta em data, dentro do ciclo vigente na data de
    referência (hoje, se não informada).

    Fator '0000' indica boleto sem vencimento e retorna None.
    """
    fator = str(fator).strip()
    if fator == "0000":
        return None
    if not (fator.isascii() and fator.isdigit()) or len(fator) != 4:
        raise EntradaInvalidaError(f"Fator de vencimento '{fator}' inválido.")

    valor = int(fator)
    if valor < FATOR_MINIMO:
        raise EntradaInvalidaError(f"Fator de vencimento '{fator}' inválido.")

    referencia = como_data(referencia or date.today())
    base = politica.data_base(referencia)
    dias_referencia = (referencia - base).days
    voltas = max(0, round((dias_referencia - valor) / CICLO))
    return base + timedelta(days=valor + voltas * CICLO)
