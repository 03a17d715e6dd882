"""Hierarquia de exceções do gerador de boletos."""


class BoletoError(Exception):
    """Erro base de todo o pacote."""


class ValidacaoError(BoletoError):
    """Dado informado pelo chamador não pode ser usado no boleto."""


class CarteiraInvalidaError(ValidacaoError):
    """Carteira fora das aceitas pelo banco."""


class EntradaInvalidaError(ValidacaoError, ValueError):
    """Valor vazio, não numérico ou maior que o campo onde deve caber."""


class DocumentoIncompletoError(BoletoError):
    """Campo obrigatório ausente no momento de gerar o boleto."""


class ConfiguracaoError(BoletoError):
    """Configuração inválida ou desconhecida."""
