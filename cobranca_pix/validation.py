from flask import request
from cobranca_pix.log import configurar_logging
from werkzeug.exceptions import BadRequest
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def validar_json():
    if not request.is_json:
        logger.warning('Requisição deve ser Content_type: application/json.')
        raise BadRequest('Requisição deve ser Content-type: application/json!')

    dados = request.get_json(silent=True)

    if not dados or not isinstance(dados, dict):
        logger.warning('Dados ausentes ou inválidos no corpo da requisição.')
        raise BadRequest('Dados ausentes ou inválidos no corpo da requisição!')

    return dados


def aplicar_regras(dados: dict, obrigatorios: dict, opcionais: dict = None):
    '''
    Confere os campos do corpo da requisição contra as REGRAS da rota.

    Devolve a mensagem de erro do primeiro problema encontrado, ou None
    quando tudo está válido.
    '''
    faltando = [c for c in obrigatorios if c not in dados or dados[c] is None]

    if faltando:
        logger.warning(f"Campos obrigatórios: {', '.join(faltando)}")
        return f"Campos obrigatórios: {', '.join(faltando)}"

    regras = dict(obrigatorios)
    regras.update({c: r for c, r in (opcionais or {}).items()
                   if dados.get(c) is not None})

    for campo, regra in regras.items():
        try:
            if not regra(dados[campo]):
                raise ValueError
        except Exception:
            logger.warning(f'Valor inválido para {campo}: {dados.get(campo)}')
            return f'Valor inválido para {campo}!'

    return None
