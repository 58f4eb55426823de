# common/utils.py
import base64, json

def b64(b: bytes) -> str:
    return base64.b64encode(b).decode()

def ub64(s: str) -> bytes:
    # strict: raises binascii.Error on characters outside the alphabet or bad padding
    return base64.b64decode(s, validate=True)

def json_dumps(obj) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
