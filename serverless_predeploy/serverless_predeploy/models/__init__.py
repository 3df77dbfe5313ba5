from .descriptor import Credentials, ServiceDescriptor
from .runtimes import RUNTIMES_EXTENSIONS, Runtime, get_extensions, supported_runtimes

__all__ = [
    'Credentials',
    'ServiceDescriptor',
    'RUNTIMES_EXTENSIONS',
    'Runtime',
    'get_extensions',
    'supported_runtimes',
]
