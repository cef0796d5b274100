from cobranca_pix.pix.emv import ErroCodigoPix, ler_tlv
from cobranca_pix.pix.crc import calcular_crc16
from cobranca_pix.pix.payload import GUI_PIX


def crc_valido(codigo: str) -> bool:
    if len(codigo) < 8 or codigo[-8:-4] != '6304':
        return False

    return calcular_crc16(codigo[:-4]) == codigo[-4:].upper()


def _subcampos(valor: str) -> dict:
    return {campo.id: campo.valor for campo in ler_tlv(valor)}


def decodificar_codigo_pix(codigo: str) -> dict:
    '''
    Lê um payload PIX estático e devolve seus campos principais.

    Levanta ErroCodigoPix quando o código está malformado ou não é um
    payload PIX. Um CRC divergente não levanta erro: é informado em
    'crc_valido'.
    '''
    codigo = codigo.strip()
    campos = ler_tlv(codigo)

    if not campos or campos[0] != ('00', '01'):
        raise ErroCodigoPix('Código não começa com o indicador de formato 000201.')

    if campos[-1].id != '63' or len(campos[-1].valor) != 4:
        raise ErroCodigoPix('Código não termina com o campo CRC 63.')

    principais = {}
    for campo in campos:
        if campo.id in principais:
            raise ErroCodigoPix(f'Campo {campo.id} repetido.')
        principais[campo.id] = campo.valor

    if '26' not in principais:
        raise ErroCodigoPix('Informações da conta (campo 26) ausentes.')

    conta = _subcampos(principais['26'])

    if conta.get('00', '').upper() != GUI_PIX:
        raise ErroCodigoPix('Identificador BR.GOV.BCB.PIX ausente no campo 26.')

    adicionais = _subcampos(principais['62']) if '62' in principais else {}

    return {
        'chave_pix': conta.get('01'),
        'descricao': conta.get('02'),
        'valor': principais.get('54'),
        'moeda': principais.get('53'),
        'pais': principais.get('58'),
        'nome_recebedor': principais.get('59'),
        'cidade_recebedor': principais.get('60'),
        'txid': adicionais.get('05'),
        'crc': principais['63'],
        'crc_valido': crc_valido(codigo),
        'campos': [list(campo) for campo in campos]
    }
