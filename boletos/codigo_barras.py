"""Montagem do código de barras de 44 posições."""

import logging

from .digitos import modulo11_dac
from .exceptions import EntradaInvalidaError
from .layout import CODIGO_BARRAS, ORDEM_SEM_DAC, TAMANHO_CODIGO_BARRAS, tamanho

logger = logging.getLogger(__name__)


def _sem_dac(codigo: str) -> str:
    dac = CODIGO_BARRAS["dac"]
    return codigo[:dac["start"]] + codigo[dac["end"]:]


def montar_codigo_barras(codigo_banco, moeda, fator_vencimento, valor, campo_livre) -> str:
    """
    Monta o código de barras:
      1. banco(3) + moeda(1) + fator(4) + valor(10) + campo livre(25) = 43 dígitos
      2. DAC pelo módulo 11 sobre esses 43 dígitos
      3. DAC inserido na posição 5
    """
    partes = {
        "banco": codigo_banco,
        "moeda": moeda,
        "fator_vencimento": fator_vencimento,
        "valor": valor,
        "campo_livre": campo_livre,
    }
    for nome in ORDEM_SEM_DAC:
        valor_campo = partes[nome]
        esperado = tamanho(CODIGO_BARRAS[nome])
        if not isinstance(valor_campo, str) or not (valor_campo.isascii() and valor_campo.isdigit()):
            raise EntradaInvalidaError(
                f"Código de barras: {nome} '{valor_campo}' deve conter apenas dígitos."
            )
        if len(valor_campo) != esperado:
            raise EntradaInvalidaError(
                f"Código de barras: {nome} '{valor_campo}' tem {len(valor_campo)} dígitos, "
                f"esperado {esperado}."
            )

    numero = "".join(partes[nome] for nome in ORDEM_SEM_DAC)
    dac = modulo11_dac(numero)

    inicio = CODIGO_BARRAS["dac"]["start"]
    codigo = numero[:inicio] + dac + numero[inicio:]
    if len(codigo) != TAMANHO_CODIGO_BARRAS:
        raise EntradaInvalidaError(
            f"O código de barras deve ter {TAMANHO_CODIGO_BARRAS} dígitos, encontrado {len(codigo)}."
        )

    logger.debug("Código de barras montado: %s (DAC %s)", codigo, dac)
    return codigo


def dac_codigo_barras(codigo: str) -> str:
    """
    Recalcula o DAC de um código de barras pronto, ignorando a posição 5.
    """
    if len(codigo) != TAMANHO_CODIGO_BARRAS:
        raise EntradaInvalidaError(
            f"Código de barras com {len(codigo)} dígitos, esperado {TAMANHO_CODIGO_BARRAS}."
        )
    return modulo11_dac(_sem_dac(codigo))


def conferir_dac(codigo: str) -> bool:
    dac = CODIGO_BARRAS["dac"]
    return dac_codigo_barras(codigo) == codigo[dac["start"]:dac["end"]]
