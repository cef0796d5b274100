from datetime import datetime, timedelta, timezone
from cobranca_pix.config import (SECRET_KEY, ALGORITHM, ACCESS_EXPIRES_MIN,
                                 REFRESH_EXPIRES_DAYS, USUARIO, SENHA_HASH)
from cobranca_pix.log import configurar_logging
from flask import jsonify, request, g
from functools import wraps
import jwt
import bcrypt
import logging


configurar_logging()
logger = logging.getLogger(__name__)


br = timezone(timedelta(hours=-3))

# bcrypt recusa senhas acima de 72 bytes
MAX_SENHA_BYTES = 72


def credenciais_validas(usuario: str, senha: str) -> bool:
    if usuario != USUARIO:
        return False

    if len(senha.encode()) > MAX_SENHA_BYTES:
        logger.warning(f'Senha com mais de {MAX_SENHA_BYTES} bytes recusada.')
        return False

    try:
        return bcrypt.checkpw(senha.encode(), SENHA_HASH.encode())
    except ValueError:
        logger.error('Hash de senha do operador inválido na configuração.')
        return False


def gerar_tokens(id_usuario: str):
    agora = datetime.now(br)
    try:
        access_payload = {
            'sub': str(id_usuario),
            'type': 'access',
            'iat': int(agora.timestamp()),
            'exp': int((agora + timedelta(minutes=ACCESS_EXPIRES_MIN)).timestamp())
        }

        refresh_payload = {
            'sub': str(id_usuario),
            'type': 'refresh',
            'iat': int(agora.timestamp()),
            'exp': int((agora + timedelta(days=REFRESH_EXPIRES_DAYS)).timestamp())
        }

        access_token = jwt.encode(access_payload, SECRET_KEY, algorithm=ALGORITHM)
        refresh_token = jwt.encode(refresh_payload, SECRET_KEY, algorithm=ALGORITHM)

        logger.info('Access e Refresh tokens gerados com sucesso.')
        return {
            'access_token': access_token,
            'refresh_token': refresh_token,
            'refresh_exp': agora + timedelta(days=REFRESH_EXPIRES_DAYS)
        }, 200

    except jwt.InvalidKeyError:
        logger.error('Chave SECRET_KEY inválida ao gerar token.')
        return {'erro': 'Chave SECRET_KEY inválida!'}, 500

    except jwt.InvalidAlgorithmError:
        logger.error('Algoritmo JWT inválido ao gerar token.')
        return {'erro': 'Algoritmo JWT inválido ao gerar token!'}, 500

    except jwt.PyJWTError as erro:
        logger.error(f'Erro inesperado ao gerar token: {str(erro)}')
        return {'erro': 'Erro inesperado ao gerar token!'}, 500


def validar_token(token: str, token_type: str = 'access'):
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])

        if payload.get('type') != token_type:
            logger.warning('Tipo de token inválido.')
            return {'erro': 'Tipo de token inválido!'}, 401

        return payload, 200

    except jwt.ExpiredSignatureError:
        logger.warning('Token expirou.')
        return {'erro': 'Token expirou!'}, 401

    except jwt.InvalidIssuedAtError:
        logger.warning("Campo 'iat' inválido no token.")
        return {'erro': "Campo 'iat' inválido no token!"}, 401

    except jwt.InvalidAlgorithmError:
        logger.warning('Algoritmo JWT inválido no token.')
        return {'erro': 'Algoritmo JWT inválido no token!'}, 401

    except jwt.InvalidSignatureError:
        logger.warning('Assinatura inválida no token.')
        return {'erro': 'Assinatura inválida no token!'}, 401

    except jwt.DecodeError:
        logger.warning('Token malformado.')
        return {'erro': 'Token malformado!'}, 401

    except jwt.InvalidTokenError:
        logger.warning('Token inválido.')
        return {'erro': 'Token inválido!'}, 401


def rota_protegida(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get('Authorization')

        if not auth:
            logger.warning('Token não enviado.')
            return jsonify({'erro': 'Token não enviado!'}), 401

        partes = auth.split()

        if len(partes) != 2 or partes[0].lower() != 'bearer':
            logger.warning('Cabeçalho malformado. Use Bearer <token>')
            return jsonify({'erro': 'Cabeçalho malformado! Use Bearer <token>'}), 401

        payload, status = validar_token(partes[1], token_type='access')

        if status != 200:
            return jsonify(payload), status

        g.id_usuario = payload.get('sub')
        return func(*args, **kwargs)
    return wrapper
