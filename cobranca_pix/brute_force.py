from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from cobranca_pix.config import LIMITE_PADRAO
from collections import defaultdict
import time


# ip -> instantes das falhas de login ainda dentro da janela
tentativa_login = defaultdict(list)

MAX_TENTATIVAS = 5
JANELA_TEMPO = 300


def _falhas_recentes(ip, agora):
    recentes = [t for t in tentativa_login.get(ip, ())
                if agora - t < JANELA_TEMPO]

    if recentes:
        tentativa_login[ip] = recentes
    else:
        tentativa_login.pop(ip, None)

    return recentes


def ip_bloqueado(ip) -> bool:
    return len(_falhas_recentes(ip, time.time())) >= MAX_TENTATIVAS


def registrar_falha(ip):
    agora = time.time()
    _falhas_recentes(ip, agora)
    tentativa_login[ip].append(agora)


def limpar_falhas(ip):
    tentativa_login.pop(ip, None)


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[LIMITE_PADRAO]
)
