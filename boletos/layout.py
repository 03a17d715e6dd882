"""Tabela de posições do código de barras e da linha digitável.

Código de barras (44 posições, padrão FEBRABAN):

    Posição  #   Conteúdo
    01 a 03  03  Código do banco
    04       01  Código da moeda - 9 para Real
    05       01  DAC do código de barras
    06 a 09  04  Fator de vencimento
    10 a 19  10  Valor do documento (8 inteiros e 2 decimais)
    20 a 44  25  Campo livre definido pelo banco

Os campos da linha digitável são descritos em função das mesmas posições,
assim as duas representações não podem divergir.
"""

from .exceptions import EntradaInvalidaError

TAMANHO_CODIGO_BARRAS = 44
TAMANHO_CAMPO_LIVRE = 25
TAMANHO_LINHA_DIGITAVEL = 47

# "start"/"end" seguem o fatiamento do Python (end exclusivo)
CODIGO_BARRAS = {
    "banco": {"start": 0, "end": 3},  # pos 1-3
    "moeda": {"start": 3, "end": 4},  # pos 4
    "dac": {"start": 4, "end": 5},  # pos 5
    "fator_vencimento": {"start": 5, "end": 9},  # pos 6-9
    "valor": {"start": 9, "end": 19},  # pos 10-19
    "campo_livre": {"start": 19, "end": 44},  # pos 20-44
}

# Ordem dos campos no número sobre o qual o DAC é calculado (43 dígitos)
ORDEM_SEM_DAC = ("banco", "moeda", "fator_vencimento", "valor", "campo_livre")

_INICIO_CL = CODIGO_BARRAS["campo_livre"]["start"]

# Cada campo da linha digitável é a concatenação de trechos do código de barras.
LINHA_DIGITAVEL = {
    "campo1": {
        # banco + moeda + posições 1-5 do campo livre
        "trechos": [
            (CODIGO_BARRAS["banco"]["start"], CODIGO_BARRAS["moeda"]["end"]),
            (_INICIO_CL, _INICIO_CL + 5),
        ],
        "dv": True,
    },
    "campo2": {
        # posições 6-15 do campo livre
        "trechos": [(_INICIO_CL + 5, _INICIO_CL + 15)],
        "dv": True,
    },
    "campo3": {
        # posições 16-25 do campo livre
        "trechos": [(_INICIO_CL + 15, _INICIO_CL + 25)],
        "dv": True,
    },
    "campo4": {
        "trechos": [(CODIGO_BARRAS["dac"]["start"], CODIGO_BARRAS["dac"]["end"])],
        "dv": False,
    },
    "campo5": {
        "trechos": [
            (CODIGO_BARRAS["fator_vencimento"]["start"], CODIGO_BARRAS["valor"]["end"]),
        ],
        "dv": False,
    },
}


def tamanho(spec) -> int:
    return spec["end"] - spec["start"]


def _campo(texto: str, spec) -> str:
    """
    Retorna o trecho do texto descrito pela entrada da tabela.
    """
    return texto[spec["start"]:spec["end"]]


def extrair_codigo_barras(codigo: str) -> dict:
    """
    Separa um código de barras de 44 dígitos nos seus campos nomeados.
    """
    if len(codigo) != TAMANHO_CODIGO_BARRAS:
        raise EntradaInvalidaError(
            f"Código de barras com {len(codigo)} dígitos, esperado {TAMANHO_CODIGO_BARRAS}."
        )
    return {nome: _campo(codigo, spec) for nome, spec in CODIGO_BARRAS.items()}


def trechos_linha_digitavel(codigo: str, nome: str) -> str:
    """
    Junta os trechos do código de barras que formam um campo da linha digitável
    (sem o DV local).
    """
    return "".join(codigo[inicio:fim] for inicio, fim in LINHA_DIGITAVEL[nome]["trechos"])
