import sys
import asyncio
import argparse

from loguru import logger

import settings
from tools.errors import CoinshiftError, ConfigError
from tools.accounts import load_accounts
from tools.evm import derive_address, build_message, get_signature, get_issued_at
from tools.models import AccountReport, ActivityResult, StepResult, ERROR_STATUS
from tools.privy import Privy
from tools.deform import Deform
from tools.request import create_session

STEPS = ('derive', 'nonce', 'sign', 'authenticate', 'login')


class Coinshift:
    def __init__(self, idx, account, sess, sleep=asyncio.sleep, now=None, activity_ids=None):
        self.idx = idx
        self.account = account
        self.sess = sess
        self.privy = Privy(idx, sess)
        self.deform = Deform(idx, sess)
        self.sleep = sleep
        self.now = now
        self.activity_ids = list(activity_ids if activity_ids is not None else settings.ACTIVITY_IDS)
        self.report = AccountReport(index=idx)

    def _step(self, step, ok, detail=''):
        self.report.steps.append(StepResult(step=step, ok=ok, detail=detail))

    def sign_in_message(self, address, nonce):
        message = build_message(
            settings.SIWE_DOMAIN,
            address,
            settings.SIWE_STATEMENT,
            settings.SIWE_URI,
            settings.SIWE_VERSION,
            settings.SIWE_CHAIN_ID,
            nonce,
            get_issued_at(self.now() if self.now else None),
            settings.SIWE_RESOURCES,
        )
        signature = get_signature(message, self.account.private_key)
        return message, signature

    async def signin(self):
        address = derive_address(self.account.private_key)
        self.report.address = address
        self._step('derive', True, address)
        logger.success(f"account {self.idx} address: {address}")

        challenge = await self.privy.init(address)
        self._step('nonce', True, challenge.nonce)
        logger.success(f"account {self.idx} got nonce: {challenge.nonce}")

        message, signature = self.sign_in_message(address, challenge.nonce)
        self._step('sign', True)
        logger.success(f"account {self.idx} signature generated")

        session = await self.privy.authenticate(
            message,
            signature,
            settings.AUTH_CHAIN_ID,
            settings.WALLET_CLIENT_TYPE,
            settings.CONNECTOR_TYPE,
            settings.AUTH_MODE,
        )
        self._step('authenticate', True, session.user_id)
        logger.success(f"account {self.idx} privy login success ✔ user: {session.user_id}, "
                       f"token: {session.token[:30]}..., linked accounts: {len(session.linked_accounts)}, "
                       f"new user: {session.is_new_user}")

        token = await self.deform.login(session.token)
        self._step('login', True)
        logger.success(f"account {self.idx} deform login success ✔ token: ...{token[-10:]}")

        return session, token

    async def claim_activities(self, token, identity_token):
        for i, activity_id in enumerate(self.activity_ids):
            if i > 0:
                await self.sleep(settings.ACTIVITY_DELAY)
            try:
                result = await self.deform.verify_activity(activity_id, token, identity_token)
            except CoinshiftError as e:
                logger.error(f"account {self.idx} claim activity {activity_id} failed ❌: {e}")
                result = ActivityResult(activity_id=activity_id, status=ERROR_STATUS, error=str(e))
            else:
                if result.status in settings.CLAIMED_STATUSES:
                    logger.success(f"account {self.idx} claim activity {activity_id} success ✅ status: {result.status}")
                else:
                    logger.warning(f"account {self.idx} activity {activity_id} not claimed, status: {result.status}")
            self.report.activities.append(result)

    def failed_step(self):
        if len(self.report.steps) < len(STEPS):
            return STEPS[len(self.report.steps)]
        return 'activities'

    async def execute(self) -> AccountReport:
        try:
            session, token = await self.signin()
        except CoinshiftError as e:
            step = self.failed_step()
            self._step(step, False, str(e))
            logger.error(f"account {self.idx} {step} failed ❌: {e}")
            return self.report

        await self.claim_activities(token, session.identity_token)
        return self.report


async def start_coinshift(idx, account, session_factory=create_session, **kwargs):
    sess = session_factory(account.proxy)
    coinshift = Coinshift(idx, account, sess, **kwargs)
    try:
        return await coinshift.execute()
    except Exception as e:
        step = coinshift.failed_step()
        coinshift._step(step, False, f'unexpected error: {e}')
        logger.exception(f"account ({idx}) {step} crashed ❌: {e}")
        return coinshift.report
    finally:
        await sess.close()


async def run_accounts(accounts, session_factory=create_session, sleep=asyncio.sleep, now=None, activity_ids=None):
    reports = []
    for idx, account in enumerate(accounts, start=1):
        logger.info(f"account {idx} start (proxy: {account.proxy or 'none'})")
        report = await start_coinshift(idx, account, session_factory,
                                       sleep=sleep, now=now, activity_ids=activity_ids)
        logger.info(f"account {idx} finished: {report.status}")
        reports.append(report)

    return reports


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Coinshift campaign daily claimer')
    parser.add_argument('--config', default=settings.ConfigFile, help='accounts file (.json, .xlsx or .csv)')
    parser.add_argument('--log-file', default=None, help='also write logs to this file')
    return parser.parse_args(argv)


async def main(argv=None):
    args = parse_args(argv)
    if args.log_file:
        logger.add(args.log_file, rotation='10 MB', encoding='utf-8')

    try:
        accounts = load_accounts(args.config)
    except ConfigError as e:
        logger.error(f"load config failed: {e}")
        return 1
    logger.success(f"loaded {len(accounts)} accounts from {args.config}")

    reports = await run_accounts(accounts)

    failed = [r.index for r in reports if r.status == 'failure']
    logger.success(f"all accounts done, failed: {failed}")
    return 0


if __name__ == '__main__':
    sys.exit(asyncio.run(main()))
