import json
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from tools.errors import ConfigError
from tools.models import Account

COLUMNS = ['private_key', 'proxy', 'refresh_token']


def _read_json(path):
    try:
        config = json.loads(path.read_text(encoding='utf-8'))
    except OSError as e:
        raise ConfigError(f'read config file {path} failed: {e}') from e
    except ValueError as e:
        raise ConfigError(f'parse config file {path} failed: {e}') from e

    if not isinstance(config, dict) or not isinstance(config.get('accounts'), list):
        raise ConfigError(f'config file {path} has no "accounts" list')

    return config['accounts']


def _read_sheet(path):
    try:
        if path.suffix.lower() == '.csv':
            df = pd.read_csv(path, dtype=str)
        else:
            df = pd.read_excel(path, sheet_name=0, dtype=str)
    except (OSError, ValueError, ImportError) as e:
        raise ConfigError(f'read account sheet {path} failed: {e}') from e

    if 'private_key' not in df.columns:
        raise ConfigError(f'account sheet {path} has no private_key column')

    # 提取每列数据，去除空值和首尾空白
    df = df.reindex(columns=COLUMNS).fillna('')
    df = df.apply(lambda col: col.str.strip())
    df = df[df['private_key'] != '']

    return df.to_dict(orient='records')


def load_accounts(filename):
    path = Path(filename)
    if path.suffix.lower() in ('.xlsx', '.xls', '.csv'):
        entries = _read_sheet(path)
    else:
        entries = _read_json(path)

    accounts = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise ConfigError(f'account #{i} is not an object')
        entry = {k: (v or None) for k, v in entry.items() if k in COLUMNS}
        if not entry.get('private_key'):
            raise ConfigError(f'account #{i} has no private_key')
        try:
            accounts.append(Account(**entry))
        except ValidationError as e:
            raise ConfigError(f'account #{i} is invalid: {e}') from e

    if not accounts:
        raise ConfigError(f'no accounts found in {path}')

    return accounts
