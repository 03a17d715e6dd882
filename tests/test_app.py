import pytest

from app import app
from boletos import BoletoConfig

from conftest import CODIGO_BARRAS_EXEMPLO, LINHA_DIGITAVEL_EXEMPLO

DADOS_EXEMPLO = {
    "agencia": "19800",
    "conta": "00582837",
    "conta_dv": "2",
    "sequencial": "15737",
    "carteira": "1",
    "valor_documento": "150.00",
    "data_vencimento": "2025-03-01",
}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setitem(app.config, "BOLETO", BoletoConfig())
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_index(client):
    resposta = client.get("/")
    assert resposta.status_code == 200
    dados = resposta.get_json()
    assert dados["banco"] == "422"
    assert dados["politica_fator"] == "data_corte"
    assert dados["layouts_disponiveis"] == ["carteira", "sistema"]


def test_gerar_boleto_json(client):
    resposta = client.post("/boleto", json=DADOS_EXEMPLO)
    assert resposta.status_code == 200
    dados = resposta.get_json()
    assert dados["codigo_barras"] == CODIGO_BARRAS_EXEMPLO
    assert dados["linha_digitavel"] == LINHA_DIGITAVEL_EXEMPLO
    assert dados["fator_vencimento"] == "1007"
    assert dados["codigo_banco"] == "422-7"
    assert dados["nosso_numero"] == "000015737"
    assert dados["modalidade"] == "Direta"
    assert dados["valor_documento"] == "150.00"


def test_gerar_boleto_formulario(client):
    resposta = client.post("/boleto", data=dict(DADOS_EXEMPLO, data_vencimento="01/03/2025"))
    assert resposta.status_code == 200
    assert resposta.get_json()["linha_digitavel"] == LINHA_DIGITAVEL_EXEMPLO


def test_gerar_boleto_campos_faltando(client):
    resposta = client.post("/boleto", json={"agencia": "19800"})
    assert resposta.status_code == 400
    erros = resposta.get_json()["erros"]
    assert "Campo obrigatório não informado: conta." in erros
    assert "Campo obrigatório não informado: data_vencimento." in erros


@pytest.mark.parametrize("valor", [0, "0", 0.0])
def test_gerar_boleto_valor_zero(client, valor):
    resposta = client.post("/boleto", json=dict(DADOS_EXEMPLO, valor_documento=valor))
    assert resposta.status_code == 200
    dados = resposta.get_json()
    assert dados["valor_documento"] == "0.00"
    assert dados["codigo_barras"][9:19] == "0000000000"


@pytest.mark.parametrize("valor", [None, "", "  "])
def test_gerar_boleto_valor_ausente(client, valor):
    resposta = client.post("/boleto", json=dict(DADOS_EXEMPLO, valor_documento=valor))
    assert resposta.status_code == 400
    assert resposta.get_json()["erros"] == ["Campo obrigatório não informado: valor_documento."]


def test_gerar_boleto_carteira_invalida(client):
    resposta = client.post("/boleto", json=dict(DADOS_EXEMPLO, carteira="3"))
    assert resposta.status_code == 400
    assert "Carteira inválida" in resposta.get_json()["erros"][0]


def test_validar_boleto(client):
    resposta = client.post("/boleto/validar", json={"linha_digitavel": LINHA_DIGITAVEL_EXEMPLO})
    assert resposta.status_code == 200
    dados = resposta.get_json()
    assert dados["erros"] == []
    assert dados["infos"]["codigo_barras"] == CODIGO_BARRAS_EXEMPLO
    assert dados["infos"]["valor_reais"] == "150.00"


def test_validar_boleto_vazio(client):
    resposta = client.post("/boleto/validar", data={})
    dados = resposta.get_json()
    assert dados["erros"] == ["Tamanho inválido: esperado 47 dígitos, recebido 0."]
    assert dados["infos"] == {}
