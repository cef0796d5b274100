import crcmod


# CRC16/CCITT-FALSE: polinômio 0x1021, início 0xFFFF, sem reflexão e sem XOR final
_crc16 = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)


def calcular_crc16(texto: str) -> str:
    crc = _crc16(texto.encode('utf-8'))
    return f"{crc & 0xFFFF:04X}"
