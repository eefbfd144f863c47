class CoinshiftError(Exception):
    """Base for everything that ends one account's run."""


class ConfigError(CoinshiftError):
    """Configuration could not be loaded; fatal for the whole run."""


class InvalidKeyFormat(CoinshiftError):
    pass


class SigningError(CoinshiftError):
    pass


class NetworkError(CoinshiftError):
    pass


class UnexpectedStatus(CoinshiftError):
    def __init__(self, status_code, body):
        self.status_code = status_code
        self.body = body
        super().__init__(f'Bad status code [{status_code}]: Response = {body[:500]}')


class DecodeError(CoinshiftError):
    pass


class GraphQLError(CoinshiftError):
    def __init__(self, message, errors=None):
        self.errors = errors or []
        super().__init__(message)
