from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union
from cobranca_pix.pix.emv import formatar_tlv
from cobranca_pix.pix.crc import calcular_crc16
import unicodedata


GUI_PIX = 'BR.GOV.BCB.PIX'
MOEDA_BRL = '986'
PAIS = 'BR'
CATEGORIA_COMERCIO = '0000'

MAX_TAMANHO_CAMPO = 99
MAX_NOME = 25
MAX_CIDADE = 15
MAX_DESCRICAO = 72
MAX_TXID = 25
MAX_VALOR = 13

TIPOS_CHAVE = ('cpf', 'cnpj', 'email', 'phone', 'random')


@dataclass(frozen=True)
class DadosPagamentoPix:
    chave_pix: str
    tipo_chave: str
    nome_recebedor: str
    cidade_recebedor: str
    valor: Optional[Union[Decimal, float, int]] = None
    txid: str = ''
    descricao: str = ''


def normalizar_texto(texto: str, limite: int) -> str:
    decomposto = unicodedata.normalize('NFD', texto)
    sem_acento = ''.join(c for c in decomposto if not unicodedata.combining(c))
    return sem_acento[:limite]


def formatar_valor(valor) -> Optional[str]:
    '''
    Formata o valor com duas casas decimais, sem símbolo nem separador
    de milhar. Valores ausentes, zerados ou negativos devolvem None:
    nesse caso o pagador digita o valor no app do banco.
    Valores não finitos (NaN, infinito) também devolvem None; valores que
    não cabem no campo 54 devem ser barrados antes, por quem chama.
    '''
    if valor is None:
        return None

    try:
        quantia = Decimal(str(valor)).quantize(
            Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    if not quantia.is_finite() or quantia <= 0:
        return None

    return f"{quantia:.2f}"


def _informacoes_conta(chave_pix: str, descricao: str) -> str:
    gui = formatar_tlv('00', GUI_PIX)
    chave = formatar_tlv('01', chave_pix)

    if not descricao:
        return gui + chave

    # o campo 26 inteiro não pode passar de 99 caracteres
    espaco = MAX_TAMANHO_CAMPO - len(gui) - len(chave) - 4

    if espaco <= 0:
        return gui + chave

    descricao = descricao[:min(MAX_DESCRICAO, espaco)]
    return gui + chave + formatar_tlv('02', descricao)


def montar_campos(dados: DadosPagamentoPix) -> list:
    campos = [
        ('00', '01'),
        ('26', _informacoes_conta(dados.chave_pix, dados.descricao)),
        ('52', CATEGORIA_COMERCIO),
        ('53', MOEDA_BRL)
    ]

    valor = formatar_valor(dados.valor)
    if valor:
        campos.append(('54', valor))

    campos.append(('58', PAIS))
    campos.append(('59', normalizar_texto(dados.nome_recebedor, MAX_NOME)))
    campos.append(('60', normalizar_texto(dados.cidade_recebedor, MAX_CIDADE)))

    if dados.txid:
        campos.append(('62', formatar_tlv('05', dados.txid[:MAX_TXID])))

    return campos


def gerar_codigo_pix(dados: DadosPagamentoPix) -> str:
    '''
    Gera o payload PIX estático (copia e cola) conforme padrão BACEN (EMV-Co).
    '''
    payload = ''.join(formatar_tlv(id_, valor)
                      for id_, valor in montar_campos(dados))

    payload += '6304'
    crc = calcular_crc16(payload)

    return payload[:-4] + formatar_tlv('63', crc)
