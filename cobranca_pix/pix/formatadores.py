from decimal import Decimal, ROUND_HALF_UP
import random
import string
import time


ALFABETO_BASE36 = string.digits + string.ascii_uppercase


def _base36(numero: int) -> str:
    if numero == 0:
        return '0'

    digitos = []
    while numero:
        numero, resto = divmod(numero, 36)
        digitos.append(ALFABETO_BASE36[resto])

    return ''.join(reversed(digitos))


def gerar_txid(prefixo: str = 'NR') -> str:
    '''
    Identificador de conciliação exibido junto ao código PIX.
    Não é token de segurança: a unicidade é apenas provável.
    '''
    marca_tempo = _base36(int(time.time() * 1000))
    aleatorio = ''.join(random.choices(ALFABETO_BASE36, k=6))
    # só a parte gerada vai para maiúsculas; o prefixo fica como veio
    return f'{prefixo}{(marca_tempo + aleatorio).upper()}'[:25]


def formatar_moeda(valor) -> str:
    quantia = Decimal(str(valor)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    sinal = '-' if quantia < 0 else ''

    texto = f'{abs(quantia):,.2f}'
    # converte para formato brasileiro 1.234,56
    texto = texto.replace(',', 'X').replace('.', ',').replace('X', '.')
    # espaço não separável depois do símbolo, como no Intl pt-BR
    return f'{sinal}R$\u00a0{texto}'
