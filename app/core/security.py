import base64
import hashlib


def hash_password(plaintext: str) -> str:
    """One-shot SHA-256 digest, base64 encoded.

    No salt and no iterations: identical passwords produce identical digests.
    """
    digest = hashlib.sha256(plaintext.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_password(plaintext: str, stored_digest: str) -> bool:
    return hash_password(plaintext) == stored_digest
