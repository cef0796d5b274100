from flask import Blueprint, jsonify, request
from cobranca_pix.auth import (MAX_SENHA_BYTES, credenciais_validas,
                               gerar_tokens, validar_token)
from cobranca_pix.brute_force import (limiter, ip_bloqueado,
                                      registrar_falha, limpar_falhas)
from cobranca_pix.config import REFRESH_EXPIRES_DAYS
from cobranca_pix.validation import validar_json, aplicar_regras
from cobranca_pix.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


auth_bp = Blueprint('auth', __name__)


def _resposta_com_tokens(tokens):
    response = jsonify({
        'access_token': tokens['access_token']
    })

    response.set_cookie(
        'refresh_token',
        tokens['refresh_token'],
        httponly=True,
        secure=False,
        samesite='Lax',
        max_age=60 * 60 * 24 * REFRESH_EXPIRES_DAYS
    )

    return response


@auth_bp.route('/login', methods=['POST'])
@limiter.limit('20 per minute')
def login():
    ip = request.remote_addr
    logger.info('Gerando tokens...')

    if ip_bloqueado(ip):
        logger.warning(f'IP={ip} bloqueado por excesso de tentativas de login.')
        return jsonify(
            {'erro': 'Muitas tentativas de login. Tente novamente mais tarde.'}), 429

    dados = validar_json()

    REGRAS = {
        'usuario': lambda v: isinstance(v, str) and v.strip() != '',
        'senha': lambda v: (isinstance(v, str) and v.strip() != ''
                            and len(v.encode()) <= MAX_SENHA_BYTES)
    }

    erro = aplicar_regras(dados, REGRAS)
    if erro:
        return jsonify({'erro': erro}), 400

    if not credenciais_validas(dados['usuario'], dados['senha']):
        registrar_falha(ip)
        logger.warning('Usuário e/ou senha inválido.')
        return jsonify({'erro': 'Usuário e/ou senha inválido!'}), 401

    limpar_falhas(ip)

    tokens, status = gerar_tokens(dados['usuario'])
    if status != 200:
        return jsonify(tokens), status

    return _resposta_com_tokens(tokens), 200


@auth_bp.route('/refresh', methods=['POST'])
def refresh():
    refresh_token = request.cookies.get('refresh_token')

    if not refresh_token:
        logger.warning('Refresh token não enviado.')
        return jsonify({'erro': 'Refresh token não enviado!'}), 401

    payload, status = validar_token(refresh_token, token_type='refresh')
    if status != 200:
        return jsonify(payload), status

    novos_tokens, status = gerar_tokens(payload['sub'])
    if status != 200:
        return jsonify(novos_tokens), status

    logger.info('Tokens renovados com sucesso.')
    return _resposta_com_tokens(novos_tokens), 200
