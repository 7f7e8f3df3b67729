# wallet_deeplinks/errors.py


class DeeplinkError(Exception):
    """Base class for everything the router raises on purpose."""


class MalformedInput(DeeplinkError):
    pass


class MalformedQueryError(MalformedInput):
    pass


class InvalidPaymentURI(MalformedInput):
    pass


class ValidationError(DeeplinkError):
    pass


class InvalidAmountError(ValidationError):
    pass


class NetworkResolutionError(DeeplinkError):
    pass


class MissingNetworkIdError(NetworkResolutionError):
    def __init__(self):
        super().__init__("missingNetworkId")


class NetworkNotFoundError(NetworkResolutionError):
    def __init__(self, chain_id: str):
        super().__init__(f"network not found for chain id {chain_id}")
        self.chain_id = chain_id


class ConfigurationError(DeeplinkError):
    pass


class RewriteLoopError(ConfigurationError):
    """The prefix table keeps rewriting a link back onto itself."""


class TokenConsumedError(DeeplinkError):
    pass


class NotInitializedError(DeeplinkError):
    pass
