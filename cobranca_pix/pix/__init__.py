from cobranca_pix.pix.emv import CampoTLV, ErroCodigoPix, formatar_tlv, ler_tlv
from cobranca_pix.pix.crc import calcular_crc16
from cobranca_pix.pix.payload import (DadosPagamentoPix, TIPOS_CHAVE,
                                      formatar_valor, gerar_codigo_pix,
                                      montar_campos, normalizar_texto)
from cobranca_pix.pix.leitor import crc_valido, decodificar_codigo_pix
from cobranca_pix.pix.chaves import formatar_telefone_chave_pix, validar_chave_pix
from cobranca_pix.pix.formatadores import formatar_moeda, gerar_txid
