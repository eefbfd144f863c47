from loguru import logger
from pydantic import ValidationError

from settings import DEFORM_URL, DEFORM_HEADERS
from tools.errors import DecodeError, GraphQLError
from tools.models import ActivityResult
from tools.request import post_json

USER_LOGIN_QUERY = '''mutation UserLogin($data: UserLoginInput!) {
			userLogin(data: $data)
		}'''

VERIFY_ACTIVITY_QUERY = '''mutation VerifyActivity($data: VerifyActivityInput!) {
  verifyActivity(data: $data) {
    record {
      id
      activityId
      status
      properties
      createdAt
      rewardRecords {
        id
        status
        appliedRewardType
        appliedRewardQuantity
        appliedRewardMetadata
        error
        rewardId
        reward {
          id
          quantity
          type
          properties
          __typename
        }
        __typename
      }
      __typename
    }
    missionRecord {
      id
      missionId
      status
      createdAt
      rewardRecords {
        id
        status
        appliedRewardType
        appliedRewardQuantity
        appliedRewardMetadata
        error
        rewardId
        reward {
          id
          quantity
          type
          properties
          __typename
        }
        __typename
      }
      __typename
    }
    __typename
  }
}'''


class Deform:
    def __init__(self, idx, sess, headers=None):
        self.idx = idx
        self.sess = sess
        self.headers = dict(headers or DEFORM_HEADERS)
        self.base_url = DEFORM_URL

    async def graphql(self, operation_name, query, variables, extra_headers=None):
        headers = self.headers.copy()
        if extra_headers:
            headers.update(extra_headers)

        json_data = {
            'operationName': operation_name,
            'variables': variables,
            'query': query,
        }

        res = await post_json(self.sess, self.base_url, headers, json_data)

        errors = res.get('errors')
        if errors is not None and not isinstance(errors, list):
            raise DecodeError(f'account {self.idx} {operation_name} returned malformed errors: {errors!r:.200}')
        if errors:
            first = errors[0]
            message = first.get('message') if isinstance(first, dict) else str(first)
            raise GraphQLError(message or f'{operation_name} failed', errors)

        data = res.get('data')
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DecodeError(f'account {self.idx} {operation_name} returned malformed data: {data!r:.200}')

        return data

    async def login(self, auth_token) -> str:
        """Trade a privy token for a deform bearer token."""
        data = await self.graphql('UserLogin', USER_LOGIN_QUERY, {
            'data': {
                'externalAuthToken': auth_token,
            },
        })

        token = data.get('userLogin')
        if not token or not isinstance(token, str):
            raise DecodeError(f'account {self.idx} userLogin returned no token')

        return token

    async def verify_activity(self, activity_id, bearer_token, identity_token) -> ActivityResult:
        extra_headers = {
            'authorization': f'Bearer {bearer_token}',
            'privy-id-token': identity_token or '',
        }

        data = await self.graphql('VerifyActivity', VERIFY_ACTIVITY_QUERY, {
            'data': {
                'activityId': activity_id,
            },
        }, extra_headers)

        verify = data.get('verifyActivity') or {}
        if not isinstance(verify, dict):
            raise DecodeError(f'account {self.idx} verifyActivity is not an object for {activity_id}')

        record = verify.get('record')
        if not record:
            raise DecodeError(f'account {self.idx} verifyActivity returned no record for {activity_id}')
        if not isinstance(record, dict):
            raise DecodeError(f'account {self.idx} verifyActivity record is not an object for {activity_id}')

        record = dict(record)
        record['rewardRecords'] = record.get('rewardRecords') or []
        record['activityId'] = activity_id
        try:
            result = ActivityResult.model_validate(record)
        except ValidationError as e:
            raise DecodeError(f'account {self.idx} bad verifyActivity record: {e}') from e

        logger.info(f"account {self.idx} activity {result.activity_id} status: {result.status}")
        return result
