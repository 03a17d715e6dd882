import json
import logging
import sys
from datetime import date

import pytest

from boletos.campo_livre import LAYOUT_CARTEIRA, LAYOUT_SISTEMA
from boletos.config import BoletoConfig
from boletos.exceptions import (
    BoletoError,
    CarteiraInvalidaError,
    ConfiguracaoError,
    DocumentoIncompletoError,
    EntradaInvalidaError,
    ValidacaoError,
)
from boletos.fator import BASE_LEGADA, BASE_NOVA, DATA_CORTE
from boletos.logging import JsonFormatter, get_logger, setup_logging

VARIAVEIS = (
    "BOLETO_POLITICA_FATOR",
    "BOLETO_LAYOUT_CAMPO_LIVRE",
    "BOLETO_DATA_CORTE",
    "BOLETO_BASE_NOVA",
    "BOLETO_BASE_LEGADA",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture
def ambiente_limpo(monkeypatch):
    for nome in VARIAVEIS:
        monkeypatch.delenv(nome, raising=False)
    return monkeypatch


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers = logger.handlers[:]
    nivel = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(nivel)


def test_config_padrao(ambiente_limpo):
    config = BoletoConfig.from_env()
    assert config.politica_fator == "data_corte"
    assert config.layout_campo_livre == "sistema"
    assert config.data_corte == DATA_CORTE
    assert config.base_nova == BASE_NOVA
    assert config.base_legada == BASE_LEGADA
    assert config.log_level == "INFO"
    assert config.log_format == "standard"


def test_config_do_ambiente(ambiente_limpo):
    ambiente_limpo.setenv("BOLETO_POLITICA_FATOR", "base_nova")
    ambiente_limpo.setenv("BOLETO_LAYOUT_CAMPO_LIVRE", "carteira")
    ambiente_limpo.setenv("BOLETO_BASE_NOVA", "2030-01-01")
    ambiente_limpo.setenv("LOG_LEVEL", "DEBUG")
    ambiente_limpo.setenv("LOG_FORMAT", "json")

    config = BoletoConfig.from_env()

    assert config.politica_fator == "base_nova"
    assert config.layout_campo_livre == "carteira"
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"
    politica = config.politica()
    assert politica.base_nova == date(2030, 1, 1)
    assert politica.data_corte is None


def test_config_politica_com_datas_proprias():
    config = BoletoConfig(data_corte=date(2040, 1, 1), base_nova=date(2039, 1, 1))
    politica = config.politica()
    assert politica.nome == "data_corte"
    assert politica.data_base(date(2039, 12, 31)) == BASE_LEGADA
    assert politica.data_base(date(2040, 1, 1)) == date(2039, 1, 1)


def test_config_layout():
    assert BoletoConfig().layout() is LAYOUT_SISTEMA
    assert BoletoConfig(layout_campo_livre="carteira").layout() is LAYOUT_CARTEIRA


@pytest.mark.parametrize(
    "variavel, valor",
    [
        ("BOLETO_POLITICA_FATOR", "sempre_legada"),
        ("BOLETO_LAYOUT_CAMPO_LIVRE", "cnab240"),
        ("BOLETO_DATA_CORTE", "22/02/2025"),
        ("LOG_FORMAT", "xml"),
    ],
)
def test_config_invalida(ambiente_limpo, variavel, valor):
    ambiente_limpo.setenv(variavel, valor)
    with pytest.raises(ConfiguracaoError):
        BoletoConfig.from_env()


def test_hierarquia_de_excecoes():
    assert issubclass(ValidacaoError, BoletoError)
    assert issubclass(CarteiraInvalidaError, ValidacaoError)
    assert issubclass(EntradaInvalidaError, ValidacaoError)
    assert issubclass(EntradaInvalidaError, ValueError)
    assert issubclass(DocumentoIncompletoError, BoletoError)
    assert not issubclass(DocumentoIncompletoError, ValidacaoError)
    assert issubclass(ConfiguracaoError, BoletoError)


def test_setup_logging_padrao(root_logger):
    setup_logging("DEBUG")
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert logging.getLogger("boletos").level == logging.DEBUG
    assert logging.getLogger("werkzeug").level == logging.WARNING


def test_setup_logging_nivel_desconhecido(root_logger):
    setup_logging("verboso")
    assert root_logger.level == logging.INFO


def test_setup_logging_json(root_logger):
    setup_logging("INFO", "json")
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)


def test_json_formatter():
    registro = logging.LogRecord(
        "boletos.safra", logging.WARNING, __file__, 1, "Carteira %s inválida", ("3",), None
    )
    registro.created = 1740225600.0
    linha = JsonFormatter().format(registro)
    dados = json.loads(linha)
    assert "inválida" in linha
    assert set(dados) == {"timestamp", "level", "logger", "message"}
    assert dados["level"] == "WARNING"
    assert dados["logger"] == "boletos.safra"
    assert dados["message"] == "Carteira 3 inválida"
    assert dados["timestamp"] == "2025-02-22T12:00:00+00:00"


def test_json_formatter_com_excecao():
    try:
        raise EntradaInvalidaError("conta vazia")
    except EntradaInvalidaError:
        registro = logging.LogRecord(
            "boletos", logging.ERROR, __file__, 1, "falhou", (), sys.exc_info()
        )
    dados = json.loads(JsonFormatter().format(registro))
    assert "EntradaInvalidaError" in dados["exception"]


def test_get_logger():
    assert get_logger("boletos.cli") is logging.getLogger("boletos.cli")
