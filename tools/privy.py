from loguru import logger
from pydantic import ValidationError

from settings import PRIVY_INIT_URL, PRIVY_AUTH_URL, PRIVY_HEADERS
from tools.errors import CoinshiftError, DecodeError
from tools.models import SiweChallenge, Session
from tools.request import post_json


class Privy:
    """Privy SIWE auth: nonce issuance and signature login.

    ``state`` walks idle -> nonce_requested -> authenticated, and ends in
    failed as soon as one request goes wrong.
    """

    def __init__(self, idx, sess, headers=None):
        self.idx = idx
        self.sess = sess
        self.headers = dict(headers or PRIVY_HEADERS)
        self.state = 'idle'

    async def _post(self, url, json_data):
        try:
            return await post_json(self.sess, url, self.headers.copy(), json_data)
        except CoinshiftError:
            self.state = 'failed'
            raise

    async def init(self, address) -> SiweChallenge:
        logger.info(f"account {self.idx} init privy auth...")
        res = await self._post(PRIVY_INIT_URL, {'address': address})

        try:
            challenge = SiweChallenge.model_validate(res)
        except ValidationError as e:
            self.state = 'failed'
            raise DecodeError(f'account {self.idx} bad privy init response: {e}') from e

        if not challenge.nonce:
            self.state = 'failed'
            raise DecodeError(f'account {self.idx} privy init returned an empty nonce')

        self.state = 'nonce_requested'
        return challenge

    async def authenticate(self, message, signature, chain_id, wallet_client_type, connector_type, mode) -> Session:
        json_data = {
            'message': message,
            'signature': signature,
            'chainId': chain_id,
            'walletClientType': wallet_client_type,
            'connectorType': connector_type,
            'mode': mode,
        }

        logger.info(f"account {self.idx} send privy authenticate request...")
        res = await self._post(PRIVY_AUTH_URL, json_data)

        try:
            session = Session.from_response(res)
        except ValidationError as e:
            self.state = 'failed'
            raise DecodeError(f'account {self.idx} bad privy authenticate response: {e}') from e

        if not session.token:
            self.state = 'failed'
            raise DecodeError(f'account {self.idx} privy authenticate returned an empty token')

        self.state = 'authenticated'
        return session
