import logging

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey


def verify_signature(body, signature, timestamp, public_key):
    """
    Verifies Discord's Ed25519 signature on an incoming request.

    Args:
        body (bytes): The raw request body, exactly as received.
        signature (str): Value of the X-Signature-Ed25519 header.
        timestamp (str): Value of the X-Signature-Timestamp header.
        public_key (str): The application's hex-encoded public key.

    Returns:
        bool: True only if the signature checks out. Any failure is False.
    """
    if not signature or not timestamp:
        logging.warning("Missing signature or timestamp")
        return False

    try:
        verify_key = VerifyKey(bytes.fromhex(public_key))
        verify_key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except BadSignatureError:
        logging.warning("Invalid request signature")
        return False
    except Exception as e:
        logging.warning(f"Signature check failed: {e}")
        return False
    return True
