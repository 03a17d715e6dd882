"""Utilitario de linha de comando para o gerador de boletos Safra."""

import argparse
import sys

from .config import BoletoConfig
from .exceptions import ConfiguracaoError, ValidacaoError
from .linha_digitavel import validar_linha_digitavel
from .logging import get_logger, setup_logging
from .safra import BoletoSafra

logger = get_logger(__name__)


def _criar_parser():
    parser = argparse.ArgumentParser(
        prog="gerador-boleto",
        description="Gera e confere código de barras e linha digitável de boletos Safra (422).",
    )
    parser.add_argument("--politica", help="política do fator de vencimento (data_corte, base_nova)")
    parser.add_argument("--layout", help="layout do campo livre (sistema, carteira)")
    sub = parser.add_subparsers(dest="comando", required=True)

    gerar = sub.add_parser("gerar", help="gera código de barras e linha digitável")
    gerar.add_argument("--agencia", required=True)
    gerar.add_argument("--conta", required=True)
    gerar.add_argument("--conta-dv", default="0")
    gerar.add_argument("--sequencial", default="0", help="nosso número (até 9 dígitos)")
    gerar.add_argument("--carteira", default="1", help="1 = Simples, 2 = Vinculada")
    gerar.add_argument("--modalidade", default="2", help="1 = Convencional, 2 = Direta")
    gerar.add_argument("--vencimento", required=True, help="AAAA-MM-DD ou DD/MM/AAAA")
    gerar.add_argument("--valor", required=True, help="ex.: 150.00 ou 150,00")

    validar = sub.add_parser("validar", help="confere uma linha digitável")
    validar.add_argument("linha")
    return parser


def _gerar(args, config):
    try:
        boleto = BoletoSafra.criar(
            agencia=args.agencia,
            conta=args.conta,
            conta_dv=args.conta_dv,
            sequencial=args.sequencial,
            carteira=args.carteira,
            modalidade=args.modalidade,
            valor_documento=args.valor,
            data_vencimento=args.vencimento,
            config=config,
        )
        codigo_barras = boleto.codigo_barras
        linha = boleto.linha_digitavel
    except ValidacaoError as exc:
        logger.warning("Boleto recusado: %s", exc)
        print(f"Erro: {exc}")
        return 1

    logger.info("Boleto gerado: %s", linha)
    dados = boleto.dados_exibicao()
    print("=== Boleto Safra ===")
    print(f"Banco: {boleto.codigo_banco_com_dv}")
    print(f"Beneficiário: {dados['codigo_cliente']}")
    print(f"Carteira: {dados['carteira']} - Modalidade: {dados['modalidade']}")
    print(f"Nosso número: {dados['nosso_numero']}-{dados['nosso_numero_dv']}")
    print(f"Vencimento: {boleto.data_vencimento.strftime('%d/%m/%Y')} (fator {boleto.fator_vencimento})")
    print(f"Valor: R$ {boleto.valor_documento:.2f}")
    print(f"Código de barras: {codigo_barras}")
    print(f"Linha digitável: {linha}")
    return 0


def _validar(args, config):
    erros, infos = validar_linha_digitavel(args.linha, config.politica())

    if erros:
        print("Problemas na linha digitável:")
        for erro in erros:
            print("   -", erro)
    else:
        print("OK. Dígitos verificadores da linha digitável conferem.")

    if infos:
        print(f"Banco: {infos['banco']} - Moeda: {infos['moeda']}")
        print(f"Vencimento: {infos['vencimento']} (fator {infos['fator_vencimento']})")
        print(f"Valor: R$ {infos['valor_reais']:.2f}")
        print(f"Código de barras: {infos['codigo_barras']}")
    return 1 if erros else 0


def main(argv=None):
    args = _criar_parser().parse_args(argv)

    try:
        config = BoletoConfig.from_env()
        if args.politica:
            config.politica_fator = args.politica
        if args.layout:
            config.layout_campo_livre = args.layout
        config.validar()
    except ConfiguracaoError as exc:
        print(f"Erro de configuração: {exc}")
        return 2

    setup_logging(config.log_level, config.log_format)

    if args.comando == "gerar":
        return _gerar(args, config)
    return _validar(args, config)


if __name__ == "__main__":
    sys.exit(main())
