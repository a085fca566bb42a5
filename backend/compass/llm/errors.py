"""Provider error taxonomy."""


class ProviderError(Exception):
    """Provider call failed; the orchestrator absorbs these."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.reason = message


class ThrottledError(ProviderError):
    """Provider signalled rate limiting or quota exhaustion."""

    pass


class TransientProviderError(ProviderError):
    """Network failure, timeout, API error or malformed output."""

    pass


class ProviderConfigurationError(Exception):
    """Provider has no credentials configured."""

    pass
