import pytest
from cobranca_pix import create_api
from cobranca_pix.auth import gerar_tokens
from cobranca_pix.brute_force import tentativa_login
from cobranca_pix.pix import DadosPagamentoPix


@pytest.fixture(autouse=True)
def limpar_tentativas():
    tentativa_login.clear()
    yield
    tentativa_login.clear()


@pytest.fixture(scope='session')
def app():
    return create_api(testing=True)


@pytest.fixture
def client(app):
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def auth_header():
    tokens, _ = gerar_tokens('admin')
    return {'Authorization': f"Bearer {tokens['access_token']}"}


@pytest.fixture
def dados_corte():
    return DadosPagamentoPix(
        chave_pix='11999999999',
        tipo_chave='phone',
        nome_recebedor='Na Regua',
        cidade_recebedor='Sao Paulo',
        valor=55.00,
        txid='NRABC123',
        descricao='Corte'
    )
