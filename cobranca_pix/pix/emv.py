from collections import namedtuple


CampoTLV = namedtuple('CampoTLV', ['id', 'valor'])


class ErroCodigoPix(ValueError):
    pass


def formatar_tlv(id_: str, valor: str) -> str:
    tamanho = f"{len(valor):02d}"
    return f"{id_}{tamanho}{valor}"


def ler_tlv(texto: str) -> list:
    '''
    Lê uma sequência TLV (id de 2 dígitos, tamanho de 2 dígitos, valor)
    e devolve os campos na ordem em que aparecem.
    '''
    campos = []
    i = 0
    total = len(texto)

    while i < total:
        if i + 4 > total:
            raise ErroCodigoPix(f'Campo incompleto na posição {i}.')

        id_ = texto[i:i + 2]
        tamanho = texto[i + 2:i + 4]

        if not tamanho.isdigit():
            raise ErroCodigoPix(f'Tamanho inválido no campo {id_}: {tamanho!r}.')

        inicio = i + 4
        fim = inicio + int(tamanho)

        if fim > total:
            raise ErroCodigoPix(f'Campo {id_} ultrapassa o fim do código.')

        campos.append(CampoTLV(id_, texto[inicio:fim]))
        i = fim

    return campos
