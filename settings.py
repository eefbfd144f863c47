ConfigFile = 'config.json'

REQUEST_TIMEOUT = 10
ACTIVITY_DELAY = 1

IMPERSONATE = 'chrome'

PRIVY_INIT_URL = 'https://auth.privy.io/api/v1/siwe/init'
PRIVY_AUTH_URL = 'https://auth.privy.io/api/v1/siwe/authenticate'
DEFORM_URL = 'https://api.deform.cc/'

# siwe message fields
SIWE_DOMAIN = 'campaign.coinshift.xyz'
SIWE_URI = 'https://campaign.coinshift.xyz'
SIWE_STATEMENT = 'By signing, you are proving you own this wallet and logging in. This does not initiate a transaction or cost any fees.'
SIWE_VERSION = '1'
SIWE_CHAIN_ID = '1'
SIWE_RESOURCES = ['https://privy.io']

# privy authenticate body
AUTH_CHAIN_ID = 'eip155:1'
WALLET_CLIENT_TYPE = 'okx_wallet'
CONNECTOR_TYPE = 'injected'
AUTH_MODE = 'login-or-sign-up'

# verifyActivity record states that count as claimed
CLAIMED_STATUSES = ('COMPLETED', 'CLAIMED')

ACTIVITY_IDS = [
    '304a9530-3720-45c8-a778-fbd3060d5cfd',
    'e3e5f263-b471-4ef3-b285-77a66e358a69',
    '907b82a0-152f-45d7-ae35-ce01de22b481',
]

USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/137.0.0.0 Safari/537.36'
SEC_CH_UA = '"Google Chrome";v="137", "Chromium";v="137", "Not/A)Brand";v="24"'

PRIVY_HEADERS = {
    'accept': 'application/json',
    'accept-encoding': 'gzip, deflate, br, zstd',
    'accept-language': 'zh-CN,zh;q=0.9,en;q=0.8',
    'content-type': 'application/json',
    'origin': 'https://campaign.coinshift.xyz',
    'priority': 'u=1, i',
    'privy-app-id': 'clphlvsh3034xjw0fvs59mrdc',
    'privy-ca-id': 'e37a03d7-0a73-423e-b427-71b288d6c199',
    'privy-client': 'react-auth:2.4.1',
    'referer': 'https://campaign.coinshift.xyz/',
    'sec-ch-ua': SEC_CH_UA,
    'sec-ch-ua-mobile': '?0',
    'sec-ch-ua-platform': '"macOS"',
    'sec-fetch-dest': 'empty',
    'sec-fetch-mode': 'cors',
    'sec-fetch-site': 'cross-site',
    'user-agent': USER_AGENT,
}

DEFORM_HEADERS = {
    'accept': '*/*',
    'accept-encoding': 'gzip, deflate, br, zstd',
    'accept-language': 'zh-CN,zh;q=0.9,en;q=0.8',
    'content-type': 'application/json',
    'origin': 'https://campaign.coinshift.xyz',
    'priority': 'u=1, i',
    'referer': 'https://campaign.coinshift.xyz/',
    'sec-ch-ua': SEC_CH_UA,
    'sec-ch-ua-mobile': '?0',
    'sec-ch-ua-platform': '"macOS"',
    'sec-fetch-dest': 'empty',
    'sec-fetch-mode': 'cors',
    'sec-fetch-site': 'cross-site',
    'user-agent': USER_AGENT,
    'x-apollo-operation-name': 'UserLogin',
}
