from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from cobranca_pix.pix import ErroCodigoPix
from cobranca_pix.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def register_erro_handlers(app):
    @app.errorhandler(404)
    def rota_nao_encontrado(erro):
        logger.warning(f'Rota não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota não encontrada!'}), 404

    @app.errorhandler(401)
    def rota_nao_autorizado(erro):
        logger.warning(f'Rota não autorizada: {str(erro)}')
        return jsonify({'erro': 'Rota não autorizada!'}), 401

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(400)
    def dados_invalidos(erro):
        logger.warning(f'Dados inválidos na rota: {str(erro)}')
        return jsonify({'erro': erro.description or 'Dados inválidos na rota!'}), 400

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido nesta rota: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido nesta rota!'}), 405

    @app.errorhandler(422)
    def logica_errada(erro):
        logger.warning(f'Dados corretos, mas lógica errada: {str(erro)}')
        return jsonify({'erro': 'Dados corretos, mas lógica errada!'}), 422

    @app.errorhandler(ErroCodigoPix)
    def codigo_pix_invalido(erro):
        logger.warning(f'Código PIX inválido: {str(erro)}')
        return jsonify({'erro': f'Código PIX inválido: {str(erro)}'}), 422

    @app.errorhandler(Exception)
    def erro_interno(erro):
        logger.error(f'Erro inesperado ao acessar a rota: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao acessar a rota!'}), 500
