from datetime import datetime, timezone

from web3 import Web3
from eth_account import Account
from eth_account.messages import encode_defunct, defunct_hash_message

from tools.errors import InvalidKeyFormat, SigningError
from tools.models import SiweMessage

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def normalize_key(private_key):
    """Return the key as 0x-prefixed 64 hex chars, validated against the curve order."""
    if not isinstance(private_key, str):
        raise InvalidKeyFormat(f'private key must be a hex string, got {type(private_key).__name__}')

    key = private_key.strip()
    if key[:2].lower() == '0x':
        key = key[2:]

    try:
        raw = bytes.fromhex(key)
    except ValueError as e:
        raise InvalidKeyFormat(f'private key is not valid hex: {e}') from e

    if len(raw) != 32:
        raise InvalidKeyFormat(f'private key must be 32 bytes, got {len(raw)}')

    if not 0 < int.from_bytes(raw, 'big') < SECP256K1_N:
        raise InvalidKeyFormat('private key is outside the secp256k1 range')

    return '0x' + key.lower()


def derive_address(private_key):
    key = normalize_key(private_key)
    try:
        return Account.from_key(key).address
    except ValueError as e:
        raise InvalidKeyFormat(f'private key conversion failed: {e}') from e


def get_issued_at(now=None):
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def build_message(domain, address, statement, uri, version, chain_id, nonce, issued_at, resources=None):
    return SiweMessage(
        domain=domain,
        address=address,
        statement=statement,
        uri=uri,
        version=version,
        chain_id=chain_id,
        nonce=nonce,
        issued_at=issued_at,
        resources=resources or [],
    ).prepare_message()


def hash_message(message):
    return bytes(defunct_hash_message(text=message))


def get_signature(message, private_key):
    try:
        key = normalize_key(private_key)
    except InvalidKeyFormat as e:
        raise SigningError(f'signing failed: {e}') from e

    encoded_msg = encode_defunct(text=message)
    try:
        signed_msg = Web3().eth.account.sign_message(encoded_msg, private_key=key)
    except (ValueError, TypeError) as e:
        raise SigningError(f'signing failed: {e}') from e

    signature = '0x' + bytes(signed_msg.signature).hex()

    return signature


def recover_address(message, signature):
    return Account.recover_message(encode_defunct(text=message), signature=signature)
