"""Configuração do gerador de boletos."""

import os
from dataclasses import dataclass
from datetime import date

from .campo_livre import obter_layout
from .exceptions import ConfiguracaoError
from .fator import BASE_LEGADA, BASE_NOVA, DATA_CORTE, PoliticaFator, obter_politica_fator


def _data_env(nome: str, padrao: date) -> date:
    valor = os.getenv(nome)
    if not valor:
        return padrao
    try:
        return date.fromisoformat(valor.strip())
    except ValueError:
        raise ConfiguracaoError(f"{nome}: data '{valor}' inválida, use AAAA-MM-DD.") from None


@dataclass
class BoletoConfig:
    """Estratégias de cálculo e parâmetros de log."""

    politica_fator: str = "data_corte"
    layout_campo_livre: str = "sistema"
    data_corte: date = DATA_CORTE
    base_nova: date = BASE_NOVA
    base_legada: date = BASE_LEGADA
    log_level: str = "INFO"
    log_format: str = "standard"

    def politica(self) -> PoliticaFator:
        """Resolve a política pelo nome, aplicando as datas configuradas."""
        modelo = obter_politica_fator(self.politica_fator)
        if modelo.data_corte is None:
            return PoliticaFator(modelo.nome, base_nova=self.base_nova)
        return PoliticaFator(
            modelo.nome,
            base_nova=self.base_nova,
            base_legada=self.base_legada,
            data_corte=self.data_corte,
        )

    def layout(self) -> dict:
        return obter_layout(self.layout_campo_livre)

    def validar(self) -> "BoletoConfig":
        self.politica()
        self.layout()
        if self.log_format not in ("standard", "json"):
            raise ConfiguracaoError(
                f"Formato de log desconhecido: '{self.log_format}'. Use standard ou json."
            )
        return self

    @classmethod
    def from_env(cls) -> "BoletoConfig":
        """Lê a configuração das variáveis de ambiente e a valida."""
        return cls(
            politica_fator=os.getenv("BOLETO_POLITICA_FATOR", "data_corte"),
            layout_campo_livre=os.getenv("BOLETO_LAYOUT_CAMPO_LIVRE", "sistema"),
            data_corte=_data_env("BOLETO_DATA_CORTE", DATA_CORTE),
            base_nova=_data_env("BOLETO_BASE_NOVA", BASE_NOVA),
            base_legada=_data_env("BOLETO_BASE_LEGADA", BASE_LEGADA),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        ).validar()
