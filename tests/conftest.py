"""Fixtures compartilhadas pelos testes."""

from datetime import date
from decimal import Decimal

import pytest

from boletos import BoletoSafra

# Exemplo do manual: agência 19800, conta 00582837-2, nosso número 000015737
CODIGO_BARRAS_EXEMPLO = "42299100700000150007198000058283720000157372"
LINHA_DIGITAVEL_EXEMPLO = "42297.19804 00058.283722 00001.573724 9 10070000015000"
CAMPO_LIVRE_EXEMPLO = "7198000058283720000157372"


@pytest.fixture
def boleto_exemplo() -> BoletoSafra:
    return BoletoSafra(
        agencia="19800",
        conta="00582837",
        conta_dv="2",
        sequencial=15737,
        carteira="1",
        valor_documento=Decimal("150.00"),
        data_vencimento=date(2025, 3, 1),
    )
