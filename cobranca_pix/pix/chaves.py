import re


REGRAS_CHAVE = {
    'cpf': lambda k: re.fullmatch(r'\d{11}', re.sub(r'\D', '', k)) is not None,
    'cnpj': lambda k: re.fullmatch(r'\d{14}', re.sub(r'\D', '', k)) is not None,
    'email': lambda k: re.fullmatch(r'[^\s@]+@[^\s@]+\.[^\s@]+', k) is not None,
    'phone': lambda k: re.fullmatch(r'\+?\d{10,14}', re.sub(r'\D', '', k)) is not None,
    'random': lambda k: re.fullmatch(r'[a-f0-9-]{32,36}', k, re.IGNORECASE) is not None
}


def validar_chave_pix(chave: str, tipo: str) -> bool:
    regra = REGRAS_CHAVE.get(tipo)

    if regra is None or not isinstance(chave, str):
        return False

    return regra(chave)


def formatar_telefone_chave_pix(telefone: str) -> str:
    digitos = re.sub(r'\D', '', telefone)

    if digitos.startswith('55'):
        return f'+{digitos}'

    return f'+55{digitos}'
