"""Código de barras e linha digitável de boletos do Banco Safra (422)."""
from .exceptions import (
    BoletoError,
    ValidacaoError,
    CarteiraInvalidaError,
    EntradaInvalidaError,
    DocumentoIncompletoError,
    ConfiguracaoError,
)

from .digitos import (
    limpar_numero,
    normalizar_numero,
    modulo10,
    modulo11_dac,
)

from .fator import (
    BASE_LEGADA,
    BASE_NOVA,
    DATA_CORTE,
    PoliticaFator,
    POLITICA_DATA_CORTE,
    POLITICA_BASE_NOVA,
    POLITICAS_FATOR,
    obter_politica_fator,
    calcular_fator_vencimento,
    data_por_fator,
)

from .campo_livre import (
    LAYOUT_SISTEMA,
    LAYOUT_CARTEIRA,
    LAYOUTS_CAMPO_LIVRE,
    obter_layout,
    montar_campo_livre,
    extrair_campos,
)

from .codigo_barras import (
    montar_codigo_barras,
    dac_codigo_barras,
    conferir_dac,
)

from .linha_digitavel import (
    formatar_linha_digitavel,
    codigo_barras_da_linha,
    validar_linha_digitavel,
)

from .safra import (
    BoletoSafra,
    ModalidadeCobranca,
)

from .config import BoletoConfig

__all__ = [
    "BoletoError",
    "ValidacaoError",
    "CarteiraInvalidaError",
    "EntradaInvalidaError",
    "DocumentoIncompletoError",
    "ConfiguracaoError",
    "limpar_numero",
    "normalizar_numero",
    "modulo10",
    "modulo11_dac",
    "BASE_LEGADA",
    "BASE_NOVA",
    "DATA_CORTE",
    "PoliticaFator",
    "POLITICA_DATA_CORTE",
    "POLITICA_BASE_NOVA",
    "POLITICAS_FATOR",
    "obter_politica_fator",
    "calcular_fator_vencimento",
    "data_por_fator",
    "LAYOUT_SISTEMA",
    "LAYOUT_CARTEIRA",
    "LAYOUTS_CAMPO_LIVRE",
    "obter_layout",
    "montar_campo_livre",
    "extrair_campos",
    "montar_codigo_barras",
    "dac_codigo_barras",
    "conferir_dac",
    "formatar_linha_digitavel",
    "codigo_barras_da_linha",
    "validar_linha_digitavel",
    "BoletoSafra",
    "ModalidadeCobranca",
    "BoletoConfig",
]
