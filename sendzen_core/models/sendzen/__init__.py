from sendzen_core.models.sendzen.config import SendZenConfig, DeveloperOptions, RequestOptions, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS

__all__ = [
    'SendZenConfig',
    'DeveloperOptions',
    'RequestOptions',
    'DEFAULT_BASE_URL',
    'DEFAULT_TIMEOUT_MS'
]
