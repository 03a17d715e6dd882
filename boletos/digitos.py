"""Dígitos verificadores (módulo 10 e módulo 11) e normalização de números."""

from .exceptions import EntradaInvalidaError


def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos.
    """
    return "".join(ch for ch in (s or "") if ch.isascii() and ch.isdigit())


def normalizar_numero(valor, campo: str) -> str:
    """
    Converte o valor informado em uma string só de dígitos.

    Pontos, traços e espaços são descartados. Se nada sobrar, o valor é
    recusado: um campo numérico vazio nunca vira zero silenciosamente.
    """
    if valor is None:
        raise EntradaInvalidaError(f"{campo}: valor não informado.")
    numero = limpar_numero(str(valor))
    if not numero:
        raise EntradaInvalidaError(
            f"{campo}: '{valor}' não contém nenhum dígito."
        )
    return numero


def _exigir_digitos(numero, nome="número"):
    if not isinstance(numero, str) or not numero:
        raise EntradaInvalidaError(f"{nome}: esperado texto numérico, recebido {numero!r}.")
    if not (numero.isascii() and numero.isdigit()):
        raise EntradaInvalidaError(f"{nome}: '{numero}' deve conter apenas dígitos.")


def modulo10(numero: str) -> str:
    """
    Calcula o dígito verificador pelo módulo 10.

    Usado nos três primeiros campos da linha digitável e no DV do nosso número:
      - pesos 2 e 1 alternados, da direita para a esquerda
      - produto com dois dígitos é trocado pela soma dos seus dígitos
      - DV = (10 - soma % 10) % 10
    """
    _exigir_digitos(numero)
    soma = 0
    multiplicador = 2
    for d in reversed(numero):
        prod = int(d) * multiplicador
        if prod > 9:
            prod = (prod // 10) + (prod % 10)
        soma += prod
        multiplicador = 1 if multiplicador == 2 else 2

    return str((10 - (soma % 10)) % 10)


def modulo11_dac(numero: str) -> str:
    """
    Calcula o DAC do código de barras (módulo 11, padrão FEBRABAN).
      - pesos de 2 a 9 (repetindo) da direita para a esquerda
      - resto = soma % 11
      - resto 0, 1 ou 10 resulta em '1'; nos demais casos DV = 11 - resto
    """
    _exigir_digitos(numero)
    soma = 0
    peso = 2
    for d in reversed(numero):
        soma += int(d) * peso
        peso += 1
        if peso > 9:
            peso = 2

    resto = soma % 11
    if resto in (0, 1, 10):
        return "1"
    return str(11 - resto)
