import json
from nftregistry.config import INDEX_SEPARATOR, DELIMITER, ESCAPE_CHAR

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Token ids live in the unsigned 64 bit range, so anything past a signed 64 bit int is stored as a string.


def encode_int(value: int):
    if INT64_MIN < value < INT64_MAX:
        return value

    return {
        '__big_int__': str(value)
    }


def encode(data):
    """ NOTE:
    Normally encoding behavior is overriden in 'default' method inside
    a class derived from json.JSONEncoder. Unfortunately this can be done only
    for custom types, and int is not one of them.
    """
    # bool is an int subclass and stays a JSON literal
    if isinstance(data, int) and not isinstance(data, bool):
        data = encode_int(data)

    return json.dumps(data, separators=(',', ':'))


def as_object(d):
    if '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


_ESCAPES = (
    (ESCAPE_CHAR, '{}25'.format(ESCAPE_CHAR)),
    (DELIMITER, '{}3A'.format(ESCAPE_CHAR)),
    (INDEX_SEPARATOR, '{}2E'.format(ESCAPE_CHAR)),
)


def escape_key(k) -> str:
    k = str(k)
    for raw, escaped in _ESCAPES:
        k = k.replace(raw, escaped)
    return k


def unescape_key(k: str) -> str:
    for raw, escaped in reversed(_ESCAPES):
        k = k.replace(escaped, raw)
    return k


def make_key(contract, variable, args=[]):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[escape_key(a) for a in args]))
    return contract_variable
