from flask import Blueprint, jsonify
from cobranca_pix.auth import rota_protegida, br
from cobranca_pix.config import EXPIRACAO_MINUTOS, PREFIXO_TXID
from cobranca_pix.validation import validar_json, aplicar_regras
from cobranca_pix.log import configurar_logging
from cobranca_pix.pix.payload import MAX_VALOR
from cobranca_pix.pix import (DadosPagamentoPix, TIPOS_CHAVE,
                              decodificar_codigo_pix, formatar_moeda,
                              formatar_telefone_chave_pix, formatar_valor,
                              gerar_codigo_pix, gerar_txid, validar_chave_pix)
from datetime import datetime, timedelta
from decimal import Decimal
import logging
import re


configurar_logging()
logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


# maior chave PIX aceita pelo DICT (e-mail)
MAX_CHAVE = 77


def _texto(v):
    return isinstance(v, str) and v.strip() != ''


def _alfanumerico(v):
    return isinstance(v, str) and re.fullmatch(r"[A-Za-z0-9]+", v) is not None


def _numero(v):
    if isinstance(v, bool) or not isinstance(v, (int, float, str)):
        return False

    quantia = Decimal(str(v))

    if not quantia.is_finite() or quantia < 0:
        return False

    # o campo 54 aceita no máximo 13 caracteres
    return len(f"{quantia:.2f}") <= MAX_VALOR


@pix_bp.route('/cobrancas', methods=['POST'])
@rota_protegida
def gerar_cobranca():
    logger.info('Gerando cobrança PIX...')

    dados = validar_json()

    REGRAS = {
        'chave_pix': lambda v: _texto(v) and len(v) <= MAX_CHAVE,
        'tipo_chave': lambda v: v in TIPOS_CHAVE,
        'nome_recebedor': _texto,
        'cidade_recebedor': _texto
    }

    OPCIONAIS = {
        'valor': _numero,
        'txid': _alfanumerico,
        'descricao': lambda v: isinstance(v, str),
        'prefixo_txid': _alfanumerico
    }

    erro = aplicar_regras(dados, REGRAS, OPCIONAIS)
    if erro:
        return jsonify({'erro': erro}), 400

    chave = dados['chave_pix'].strip()
    tipo = dados['tipo_chave']

    if not validar_chave_pix(chave, tipo):
        logger.warning(f'Chave PIX inválida para o tipo {tipo}.')
        return jsonify({'erro': f'Chave PIX inválida para o tipo {tipo}!'}), 400

    if tipo == 'phone':
        chave = formatar_telefone_chave_pix(chave)

    txid = dados.get('txid') or gerar_txid(
        dados.get('prefixo_txid') or PREFIXO_TXID)

    valor = dados.get('valor')
    valor = Decimal(str(valor)) if valor is not None else None

    codigo = gerar_codigo_pix(DadosPagamentoPix(
        chave_pix=chave,
        tipo_chave=tipo,
        nome_recebedor=dados['nome_recebedor'],
        cidade_recebedor=dados['cidade_recebedor'],
        valor=valor,
        txid=txid,
        descricao=dados.get('descricao') or ''
    ))

    expira_em = datetime.now(br) + timedelta(minutes=EXPIRACAO_MINUTOS)

    logger.info(f'Cobrança PIX txid={txid} gerada com sucesso.')
    return jsonify({
        'codigo_pix': codigo,
        'txid': txid[:25],
        'valor': formatar_valor(valor),
        'valor_formatado': formatar_moeda(valor or 0),
        'expira_em': expira_em.isoformat()
    }), 201


@pix_bp.route('/chaves/validar', methods=['POST'])
@rota_protegida
def validar_chave():
    dados = validar_json()

    REGRAS = {
        'chave': lambda v: isinstance(v, str),
        'tipo': lambda v: isinstance(v, str)
    }

    erro = aplicar_regras(dados, REGRAS)
    if erro:
        return jsonify({'erro': erro}), 400

    valida = validar_chave_pix(dados['chave'], dados['tipo'])
    resposta = {'valida': valida}

    if valida and dados['tipo'] == 'phone':
        resposta['chave_formatada'] = formatar_telefone_chave_pix(dados['chave'])

    logger.info(f"Chave do tipo {dados['tipo']} validada: {valida}.")
    return jsonify(resposta), 200


@pix_bp.route('/decodificar', methods=['POST'])
@rota_protegida
def decodificar():
    dados = validar_json()

    erro = aplicar_regras(dados, {'codigo_pix': _texto})
    if erro:
        return jsonify({'erro': erro}), 400

    # ErroCodigoPix vira 422 em register_erro_handlers
    campos = decodificar_codigo_pix(dados['codigo_pix'])

    if not campos['crc_valido']:
        logger.warning('Código PIX com CRC divergente.')

    return jsonify(campos), 200
