import os
import bcrypt


SECRET_KEY = os.environ.get('PIX_API_SECRET_KEY', 'troque-esta-chave-em-producao')
ALGORITHM = 'HS256'
ACCESS_EXPIRES_MIN = 30
REFRESH_EXPIRES_DAYS = 7

USUARIO = os.environ.get('PIX_API_USUARIO', 'admin')
SENHA_HASH = os.environ.get('PIX_API_SENHA_HASH') or bcrypt.hashpw(
    os.environ.get('PIX_API_SENHA', 'admin123').encode(),
    bcrypt.gensalt()
).decode()

LOG_DIR = os.environ.get('PIX_API_LOG_DIR', 'logs')

EXPIRACAO_MINUTOS = int(os.environ.get('PIX_API_EXPIRACAO_MINUTOS', '30'))
LIMITE_PADRAO = os.environ.get('PIX_API_LIMITE_PADRAO', '100 per hour')
PREFIXO_TXID = 'NR'
