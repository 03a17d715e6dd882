"""Montagem do campo livre (posições 20 a 44 do código de barras)."""

from .exceptions import ConfiguracaoError, EntradaInvalidaError
from .layout import TAMANHO_CAMPO_LIVRE, _campo, tamanho

# Posições relativas ao campo livre. "completar" indica de que lado entram
# os zeros quando o valor é mais curto que o campo.
LAYOUT_SISTEMA = {
    "sistema": {"start": 0, "end": 1, "fixo": "7"},  # pos 20
    "agencia": {"start": 1, "end": 6, "completar": "direita"},  # pos 21-25
    "conta": {"start": 6, "end": 14, "completar": "esquerda"},  # pos 26-33
    "conta_dv": {"start": 14, "end": 15, "completar": "esquerda"},  # pos 34
    "nosso_numero": {"start": 15, "end": 24, "completar": "esquerda"},  # pos 35-43
    "tipo_cobranca": {"start": 24, "end": 25, "completar": "esquerda"},  # pos 44
}

# Agência + conta completa + nosso número + carteira + zero
LAYOUT_CARTEIRA = {
    "agencia": {"start": 0, "end": 5, "completar": "direita"},  # pos 20-24
    "conta": {"start": 5, "end": 13, "completar": "esquerda"},  # pos 25-32
    "conta_dv": {"start": 13, "end": 14, "completar": "esquerda"},  # pos 33
    "nosso_numero": {"start": 14, "end": 23, "completar": "esquerda"},  # pos 34-42
    "carteira": {"start": 23, "end": 24, "completar": "esquerda"},  # pos 43
    "zero": {"start": 24, "end": 25, "fixo": "0"},  # pos 44
}

LAYOUTS_CAMPO_LIVRE = {
    "sistema": LAYOUT_SISTEMA,
    "carteira": LAYOUT_CARTEIRA,
}


def obter_layout(nome: str) -> dict:
    layout = LAYOUTS_CAMPO_LIVRE.get((nome or "").strip().lower())
    if layout is None:
        raise ConfiguracaoError(
            f"Layout de campo livre desconhecido: '{nome}'. "
            f"Use um de: {', '.join(sorted(LAYOUTS_CAMPO_LIVRE))}."
        )
    return layout


def _preencher(nome, valor, spec):
    largura = tamanho(spec)
    if "fixo" in spec:
        return spec["fixo"]

    if valor is None:
        raise EntradaInvalidaError(f"Campo livre: '{nome}' não informado.")
    valor = str(valor)
    if not valor or not (valor.isascii() and valor.isdigit()):
        raise EntradaInvalidaError(
            f"Campo livre: {nome} '{valor}' deve conter apenas dígitos."
        )
    if len(valor) > largura:
        raise EntradaInvalidaError(
            f"Campo livre: {nome} '{valor}' tem {len(valor)} dígitos, máximo {largura}."
        )

    if spec.get("completar") == "direita":
        return valor.ljust(largura, "0")
    return valor.zfill(largura)


def montar_campo_livre(valores, layout="sistema") -> str:
    """
    Monta os 25 dígitos do campo livre a partir dos valores nomeados.

    Nenhum valor é truncado: um valor maior que o seu campo é recusado antes
    da montagem.
    """
    campos = obter_layout(layout) if isinstance(layout, str) else layout
    partes = [
        _preencher(nome, valores.get(nome), spec)
        for nome, spec in sorted(campos.items(), key=lambda item: item[1]["start"])
    ]

    campo_livre = "".join(partes)
    if len(campo_livre) != TAMANHO_CAMPO_LIVRE:
        raise ConfiguracaoError(
            f"Layout do campo livre gera {len(campo_livre)} dígitos, esperado {TAMANHO_CAMPO_LIVRE}."
        )
    return campo_livre


def extrair_campos(campo_livre: str, layout="sistema") -> dict:
    """
    Separa um campo livre de 25 dígitos nos seus campos nomeados.
    """
    if len(campo_livre) != TAMANHO_CAMPO_LIVRE:
        raise EntradaInvalidaError(
            f"Campo livre com {len(campo_livre)} dígitos, esperado {TAMANHO_CAMPO_LIVRE}."
        )
    campos = obter_layout(layout) if isinstance(layout, str) else layout
    return {nome: _campo(campo_livre, spec) for nome, spec in campos.items()}
