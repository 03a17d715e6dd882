"""Linha digitável: formatação a partir do código de barras e conferência."""

from decimal import Decimal

from .codigo_barras import dac_codigo_barras
from .digitos import limpar_numero, modulo10
from .exceptions import EntradaInvalidaError
from .fator import POLITICA_DATA_CORTE, data_por_fator
from .layout import (
    LINHA_DIGITAVEL,
    TAMANHO_CODIGO_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
    extrair_codigo_barras,
    trechos_linha_digitavel,
)

ROTULOS = {
    "campo1": "Campo 1",
    "campo2": "Campo 2",
    "campo3": "Campo 3",
}


def _formatar_campo(base: str, dv: str) -> str:
    bloco = base + dv
    return f"{bloco[:5]}.{bloco[5:]}"


def formatar_linha_digitavel(codigo_barras: str) -> str:
    """
    Monta a linha digitável a partir do código de barras.

    Campo 1: banco + moeda + posições 1-5 do campo livre + DV (módulo 10)
    Campo 2: posições 6-15 do campo livre + DV (módulo 10)
    Campo 3: posições 16-25 do campo livre + DV (módulo 10)
    Campo 4: DAC do código de barras
    Campo 5: fator de vencimento + valor
    """
    if len(codigo_barras) != TAMANHO_CODIGO_BARRAS or not codigo_barras.isdigit():
        raise EntradaInvalidaError(
            f"Código de barras deve ter {TAMANHO_CODIGO_BARRAS} dígitos, recebido '{codigo_barras}'."
        )

    campos = []
    for nome, spec in LINHA_DIGITAVEL.items():
        base = trechos_linha_digitavel(codigo_barras, nome)
        if spec["dv"]:
            campos.append(_formatar_campo(base, modulo10(base)))
        else:
            campos.append(base)
    return " ".join(campos)


def _separar_campos(numeros: str) -> dict:
    """
    Divide os 47 dígitos da linha em (conteúdo, dv) por campo, na ordem da tabela.
    """
    campos = {}
    pos = 0
    for nome, spec in LINHA_DIGITAVEL.items():
        largura = sum(fim - inicio for inicio, fim in spec["trechos"])
        base = numeros[pos:pos + largura]
        pos += largura
        dv = None
        if spec["dv"]:
            dv = numeros[pos]
            pos += 1
        campos[nome] = (base, dv)
    return campos


def _remontar_codigo_barras(campos: dict) -> str:
    codigo = [""] * TAMANHO_CODIGO_BARRAS
    for nome, spec in LINHA_DIGITAVEL.items():
        base = campos[nome][0]
        for inicio, fim in spec["trechos"]:
            codigo[inicio:fim] = list(base[:fim - inicio])
            base = base[fim - inicio:]
    return "".join(codigo)


def codigo_barras_da_linha(linha: str) -> str:
    """
    Reconstrói o código de barras (44 dígitos) a partir da linha digitável.
    Não confere os dígitos verificadores; para isso use validar_linha_digitavel.
    """
    numeros = limpar_numero(linha)
    if len(numeros) != TAMANHO_LINHA_DIGITAVEL:
        raise EntradaInvalidaError(
            f"Tamanho inválido: esperado {TAMANHO_LINHA_DIGITAVEL} dígitos, recebido {len(numeros)}."
        )
    return _remontar_codigo_barras(_separar_campos(numeros))


def validar_linha_digitavel(linha: str, politica=POLITICA_DATA_CORTE, referencia=None):
    """
    Valida uma linha digitável de boleto (47 dígitos, padrão cobrança).

    Retorna (erros, infos), onde:
      - erros: lista de mensagens de erro (DV incorreto, tamanho, etc.)
      - infos: dicionário com dados extraídos (banco, valor, vencimento, código de barras, etc.)
    """
    erros = []
    infos = {}

    numeros = limpar_numero(linha)

    if len(numeros) != TAMANHO_LINHA_DIGITAVEL:
        erros.append(
            f"Tamanho inválido: esperado {TAMANHO_LINHA_DIGITAVEL} dígitos, recebido {len(numeros)}."
        )
        return erros, infos

    campos = _separar_campos(numeros)

    # 1) DVs dos 3 primeiros campos (módulo 10)
    for nome, rotulo in ROTULOS.items():
        base, dv = campos[nome]
        esperado = modulo10(base)
        if esperado != dv:
            erros.append(
                f"Dígito verificador do {rotulo} inválido. Esperado {esperado}, encontrado {dv}."
            )

    # 2) Código de barras e DAC geral (módulo 11)
    codigo_barras = _remontar_codigo_barras(campos)
    dados = extrair_codigo_barras(codigo_barras)
    dac_calculado = dac_codigo_barras(codigo_barras)
    if dac_calculado != dados["dac"]:
        erros.append(
            f"Dígito verificador geral inválido. Esperado {dac_calculado}, encontrado {dados['dac']}."
        )

    infos["codigo_barras"] = codigo_barras
    infos["banco"] = dados["banco"]
    infos["moeda"] = dados["moeda"]
    infos["campo_livre"] = dados["campo_livre"]
    infos["fator_vencimento"] = dados["fator_vencimento"]

    # 3) Fator de vencimento
    try:
        vencimento = data_por_fator(dados["fator_vencimento"], politica, referencia)
    except EntradaInvalidaError as exc:
        erros.append(str(exc))
        infos["vencimento"] = None
    else:
        if vencimento is None:
            infos["vencimento"] = "Sem data de vencimento (fator 0000)"
        else:
            infos["vencimento"] = vencimento.strftime("%d/%m/%Y")

    # 4) Valor
    valor_centavos = int(dados["valor"])
    infos["valor_centavos"] = valor_centavos
    infos["valor_reais"] = (Decimal(valor_centavos) / 100).quantize(Decimal("0.01"))

    return erros, infos
