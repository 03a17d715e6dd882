from flask import Flask, jsonify, request

from boletos import (
    LAYOUTS_CAMPO_LIVRE,
    POLITICAS_FATOR,
    BoletoConfig,
    BoletoSafra,
    ValidacaoError,
    validar_linha_digitavel,
)
from boletos.logging import get_logger, setup_logging

CAMPOS_OBRIGATORIOS = ("agencia", "conta", "data_vencimento", "valor_documento")

logger = get_logger(__name__)

app = Flask(__name__)
app.config["BOLETO"] = BoletoConfig.from_env()


def _dados_requisicao():
    """
    Aceita tanto JSON quanto formulário.
    """
    dados = request.get_json(silent=True)
    if isinstance(dados, dict):
        return dados
    return request.form.to_dict()


def _vazio(valor):
    return valor is None or str(valor).strip() == ""


@app.route("/")
def index():
    """
    Descreve o serviço e as estratégias configuradas.
    """
    config = app.config["BOLETO"]
    return jsonify(
        {
            "banco": BoletoSafra.codigo_banco,
            "politica_fator": config.politica_fator,
            "layout_campo_livre": config.layout_campo_livre,
            "politicas_disponiveis": sorted(POLITICAS_FATOR),
            "layouts_disponiveis": sorted(LAYOUTS_CAMPO_LIVRE),
        }
    )


@app.route("/boleto", methods=["POST"])
def gerar_boleto():
    """
    Recebe os dados do título e devolve código de barras e linha digitável.
    """
    dados = _dados_requisicao()

    faltando = [campo for campo in CAMPOS_OBRIGATORIOS if _vazio(dados.get(campo))]
    if faltando:
        return jsonify({"erros": [f"Campo obrigatório não informado: {campo}." for campo in faltando]}), 400

    try:
        boleto = BoletoSafra.criar(
            agencia=dados["agencia"],
            conta=dados["conta"],
            conta_dv=dados.get("conta_dv") or "0",
            sequencial=dados.get("sequencial") or 0,
            carteira=dados.get("carteira") or "1",
            modalidade=dados.get("modalidade") or "2",
            valor_documento=dados["valor_documento"],
            data_vencimento=dados["data_vencimento"],
            config=app.config["BOLETO"],
        )
        resultado = {
            "codigo_banco": boleto.codigo_banco_com_dv,
            "codigo_barras": boleto.codigo_barras,
            "linha_digitavel": boleto.linha_digitavel,
            "fator_vencimento": boleto.fator_vencimento,
            "campo_livre": boleto.campo_livre,
            "data_vencimento": boleto.data_vencimento.isoformat(),
            "valor_documento": f"{boleto.valor_documento:.2f}",
            "local_pagamento": boleto.local_pagamento,
        }
    except ValidacaoError as exc:
        logger.warning("Boleto recusado: %s", exc)
        return jsonify({"erros": [str(exc)]}), 400

    logger.info("Boleto gerado: %s", resultado["linha_digitavel"])
    resultado.update(boleto.dados_exibicao())
    return jsonify(resultado)


@app.route("/boleto/validar", methods=["POST"])
def validar_boleto():
    """
    Confere os dígitos verificadores de uma linha digitável.
    """
    dados = _dados_requisicao()
    linha_digitavel = str(dados.get("linha_digitavel") or "").strip()
    erros, infos = validar_linha_digitavel(linha_digitavel, app.config["BOLETO"].politica())
    if "valor_reais" in infos:
        infos["valor_reais"] = f"{infos['valor_reais']:.2f}"
    return jsonify({"erros": erros, "infos": infos})


if __name__ == "__main__":
    setup_logging(app.config["BOLETO"].log_level, app.config["BOLETO"].log_format)
    # debug=True é útil durante o desenvolvimento
    app.run(debug=True)
