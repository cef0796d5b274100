from unittest.mock import patch
from cobranca_pix.pix import (DadosPagamentoPix, crc_valido,
                              decodificar_codigo_pix, gerar_codigo_pix)


def cobranca(**kwargs):
    dados = {
        'chave_pix': '11999999999',
        'tipo_chave': 'phone',
        'nome_recebedor': 'Na Régua',
        'cidade_recebedor': 'São Paulo',
        'valor': 55.00,
        'txid': 'NRABC123',
        'descricao': 'Corte'
    }
    dados.update(kwargs)
    return dados


def test_gerar_cobranca_sucesso(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header, json=cobranca())

    assert resp.status_code == 201
    assert resp.json['txid'] == 'NRABC123'
    assert resp.json['valor'] == '55.00'
    assert resp.json['valor_formatado'] == 'R$\u00a055,00'
    assert 'expira_em' in resp.json

    codigo = resp.json['codigo_pix']
    assert crc_valido(codigo)

    campos = decodificar_codigo_pix(codigo)
    assert campos['chave_pix'] == '+5511999999999'
    assert campos['nome_recebedor'] == 'Na Regua'
    assert campos['cidade_recebedor'] == 'Sao Paulo'


def test_gerar_cobranca_sem_valor(client, auth_header):
    dados = cobranca()
    del dados['valor']

    resp = client.post('/pix/cobrancas', headers=auth_header, json=dados)

    assert resp.status_code == 201
    assert resp.json['valor'] is None
    assert decodificar_codigo_pix(resp.json['codigo_pix'])['valor'] is None


def test_gerar_cobranca_gera_txid_quando_ausente(client, auth_header):
    dados = cobranca(prefixo_txid='BB')
    del dados['txid']

    with patch('cobranca_pix.routes.pix.gerar_txid',
               return_value='BBTESTE123') as mock_txid:
        resp = client.post('/pix/cobrancas', headers=auth_header, json=dados)

    assert resp.status_code == 201
    mock_txid.assert_called_once_with('BB')
    assert resp.json['txid'] == 'BBTESTE123'
    assert decodificar_codigo_pix(resp.json['codigo_pix'])['txid'] == 'BBTESTE123'


def test_gerar_cobranca_chave_email_sem_alteracao(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header, json=cobranca(
        chave_pix='cliente@barbearia.com.br', tipo_chave='email'))

    assert resp.status_code == 201
    campos = decodificar_codigo_pix(resp.json['codigo_pix'])
    assert campos['chave_pix'] == 'cliente@barbearia.com.br'


def test_gerar_cobranca_igual_ao_gerador(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header, json=cobranca(
        chave_pix='12345678909', tipo_chave='cpf'))

    esperado = gerar_codigo_pix(DadosPagamentoPix(
        chave_pix='12345678909', tipo_chave='cpf',
        nome_recebedor='Na Régua', cidade_recebedor='São Paulo',
        valor=55, txid='NRABC123', descricao='Corte'))

    assert resp.json['codigo_pix'] == esperado


def test_gerar_cobranca_chave_invalida(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(chave_pix='abc@x', tipo_chave='email'))

    assert resp.status_code == 400
    assert 'email' in resp.json['erro']


def test_gerar_cobranca_tipo_desconhecido(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(tipo_chave='boleto'))

    assert resp.status_code == 400


def test_gerar_cobranca_campo_obrigatorio(client, auth_header):
    dados = cobranca()
    del dados['nome_recebedor']

    resp = client.post('/pix/cobrancas', headers=auth_header, json=dados)

    assert resp.status_code == 400
    assert 'nome_recebedor' in resp.json['erro']


def test_gerar_cobranca_valor_negativo(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(valor=-1))

    assert resp.status_code == 400


def test_gerar_cobranca_valor_texto_invalido(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(valor='dez reais'))

    assert resp.status_code == 400


def test_gerar_cobranca_txid_com_simbolos(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(txid='NR-123'))

    assert resp.status_code == 400


def test_gerar_cobranca_sem_json(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header, data='x')

    assert resp.status_code == 400


def test_validar_chave_telefone(client, auth_header):
    resp = client.post('/pix/chaves/validar', headers=auth_header,
                       json={'chave': '(11) 99999-9999', 'tipo': 'phone'})

    assert resp.status_code == 200
    assert resp.json == {'valida': True, 'chave_formatada': '+5511999999999'}


def test_validar_chave_cpf_invalido(client, auth_header):
    resp = client.post('/pix/chaves/validar', headers=auth_header,
                       json={'chave': '123', 'tipo': 'cpf'})

    assert resp.status_code == 200
    assert resp.json == {'valida': False}


def test_decodificar_codigo(client, auth_header, dados_corte):
    codigo = gerar_codigo_pix(dados_corte)

    resp = client.post('/pix/decodificar', headers=auth_header,
                       json={'codigo_pix': codigo})

    assert resp.status_code == 200
    assert resp.json['valor'] == '55.00'
    assert resp.json['txid'] == 'NRABC123'
    assert resp.json['crc_valido'] is True


def test_decodificar_codigo_malformado(client, auth_header):
    resp = client.post('/pix/decodificar', headers=auth_header,
                       json={'codigo_pix': 'nao e um pix'})

    assert resp.status_code == 422
    assert 'erro' in resp.json


def test_rota_inexistente(client, auth_header):
    resp = client.get('/pix/nada', headers=auth_header)

    assert resp.status_code == 404


def test_metodo_nao_permitido(client, auth_header):
    resp = client.get('/pix/cobrancas', headers=auth_header)

    assert resp.status_code == 405


def test_gerar_cobranca_chave_longa_com_descricao(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header, json=cobranca(
        chave_pix='a' * 64 + '@exemplo.com', tipo_chave='email',
        descricao='Corte de cabelo'))

    assert resp.status_code == 201

    campos = decodificar_codigo_pix(resp.json['codigo_pix'])
    assert campos['chave_pix'] == 'a' * 64 + '@exemplo.com'
    assert campos['crc_valido'] is True


def test_gerar_cobranca_valor_grande_demais(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(valor=1e100))

    assert resp.status_code == 400
    assert 'valor' in resp.json['erro']


def test_gerar_cobranca_valor_limite_do_campo_54(client, auth_header):
    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(valor='9999999999.99'))

    assert resp.status_code == 201
    assert resp.json['valor'] == '9999999999.99'

    resp = client.post('/pix/cobrancas', headers=auth_header,
                       json=cobranca(valor='10000000000'))

    assert resp.status_code == 400
