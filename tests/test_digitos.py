import pytest

from boletos.digitos import limpar_numero, modulo10, modulo11_dac, normalizar_numero
from boletos.exceptions import EntradaInvalidaError


@pytest.mark.parametrize(
    "numero, esperado",
    [
        ("0", "0"),
        ("1", "8"),
        ("5", "9"),
        ("9", "1"),
        ("26", "5"),
        ("422971980", "4"),
        ("0005828372", "2"),
        ("0000157372", "4"),
        ("000015737", "0"),
    ],
)
def test_modulo10(numero, esperado):
    assert modulo10(numero) == esperado


@pytest.mark.parametrize(
    "numero, esperado",
    [
        ("0", "1"),  # resto 0
        ("6", "1"),  # resto 1
        ("5", "1"),  # resto 10
        ("1", "9"),
        ("3", "5"),
        ("4", "3"),
        ("9", "4"),
        ("4229100700000150007198000058283720000157372", "9"),
    ],
)
def test_modulo11_dac(numero, esperado):
    assert modulo11_dac(numero) == esperado


@pytest.mark.parametrize("numero", ["7", "123456789", "0000000000", "98765432109876543210"])
def test_digitos_verificadores_retornam_um_digito(numero):
    for funcao in (modulo10, modulo11_dac):
        dv = funcao(numero)
        assert len(dv) == 1 and dv.isdigit()
        assert funcao(numero) == dv


def test_dac_nunca_retorna_zero():
    for n in range(0, 2000):
        assert modulo11_dac(str(n)) != "0"


@pytest.mark.parametrize("numero", ["", "12a4", "12 34", "19.800", None, 1234])
def test_digitos_recusam_entrada_nao_numerica(numero):
    with pytest.raises(EntradaInvalidaError):
        modulo10(numero)
    with pytest.raises(EntradaInvalidaError):
        modulo11_dac(numero)


@pytest.mark.parametrize(
    "texto, esperado",
    [
        ("19.800-0", "198000"),
        ("  0058283-7 ", "00582837"),
        ("abc", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_limpar_numero(texto, esperado):
    assert limpar_numero(texto) == esperado


def test_normalizar_numero():
    assert normalizar_numero("0058283-7", "conta") == "00582837"
    assert normalizar_numero(15737, "sequencial") == "15737"


@pytest.mark.parametrize("valor", ["", "   ", "-.-", None])
def test_normalizar_numero_vazio(valor):
    with pytest.raises(EntradaInvalidaError, match="conta"):
        normalizar_numero(valor, "conta")
