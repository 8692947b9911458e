from bcrypt import checkpw, gensalt, hashpw

# bcrypt only looks at the first 72 bytes of a password
_MAX_PASSWORD_BYTES = 72


def _encode(raw_password: str) -> bytes:
    return raw_password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(raw_password: str, rounds: int = 12) -> str:
    return hashpw(_encode(raw_password), gensalt(rounds=rounds)).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    return checkpw(_encode(raw_password), password_hash.encode("utf-8"))
