from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# local status for a claim that failed at the http/graphql layer
ERROR_STATUS = 'ERROR'


class Account(BaseModel):
    model_config = ConfigDict(frozen=True)

    private_key: str
    proxy: Optional[str] = None
    refresh_token: Optional[str] = None


class SiweMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    domain: str
    address: str
    statement: Optional[str] = None
    uri: str
    version: str = '1'
    chain_id: str = '1'
    nonce: str
    issued_at: str
    resources: List[str] = Field(default_factory=list)

    def prepare_message(self) -> str:
        lines = [
            f'{self.domain} wants you to sign in with your Ethereum account:',
            self.address,
            '',
        ]
        if self.statement:
            lines += [self.statement, '']
        else:
            lines.append('')

        lines += [
            f'URI: {self.uri}',
            f'Version: {self.version}',
            f'Chain ID: {self.chain_id}',
            f'Nonce: {self.nonce}',
            f'Issued At: {self.issued_at}',
        ]
        if self.resources:
            lines.append('Resources:')
            lines += [f'- {resource}' for resource in self.resources]

        return '\n'.join(lines)


class SiweChallenge(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nonce: str
    address: Optional[str] = None
    expires_at: Union[str, int, None] = Field(default=None, validation_alias=AliasChoices('expiresAt', 'expires_at'))


class LinkedAccount(BaseModel):
    type: str
    address: Optional[str] = None
    chain_type: Optional[str] = None
    wallet_client_type: Optional[str] = None
    connector_type: Optional[str] = None


class Session(BaseModel):
    user_id: str
    token: str
    privy_access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    identity_token: Optional[str] = None
    is_new_user: bool = False
    linked_accounts: List[LinkedAccount] = Field(default_factory=list)

    @classmethod
    def from_response(cls, res: dict) -> 'Session':
        user = res.get('user') or {}
        return cls(
            user_id=user.get('id', ''),
            token=res.get('token') or '',
            privy_access_token=res.get('privy_access_token'),
            refresh_token=res.get('refresh_token'),
            identity_token=res.get('identity_token'),
            is_new_user=bool(res.get('is_new_user')),
            linked_accounts=user.get('linked_accounts') or [],
        )


class RewardRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    status: Optional[str] = None
    reward_type: Optional[str] = Field(default=None, alias='appliedRewardType')
    quantity: Optional[int] = Field(default=None, alias='appliedRewardQuantity')
    error: Any = None


class ActivityResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    activity_id: str = Field(alias='activityId')
    status: str
    record_id: Optional[str] = Field(default=None, alias='id')
    rewards: List[RewardRecord] = Field(default_factory=list, alias='rewardRecords')
    error: Optional[str] = None


class StepResult(BaseModel):
    step: str
    ok: bool
    detail: str = ''


class AccountReport(BaseModel):
    index: int
    address: Optional[str] = None
    steps: List[StepResult] = Field(default_factory=list)
    activities: List[ActivityResult] = Field(default_factory=list)

    @property
    def status(self) -> str:
        if not self.steps or not all(step.ok for step in self.steps):
            return 'failure'
        if any(activity.status == ERROR_STATUS for activity in self.activities):
            return 'partial'
        return 'success'
