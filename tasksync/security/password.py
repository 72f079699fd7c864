import hashlib

import bcrypt


def _pw_prehash(pw: str) -> bytes:
    """Pré-hash SHA-256 pour contourner la limite de 72 octets de bcrypt."""
    return hashlib.sha256(pw.encode("utf-8")).digest()


def hash_password(pw: str) -> str:
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(_pw_prehash(pw), salt).decode("utf-8")


def verify_password(pw: str, pw_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_pw_prehash(pw), pw_hash.encode("utf-8"))
    except ValueError:
        # hash corrompu / pas un hash bcrypt
        return False
