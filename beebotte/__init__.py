"""
Beebotte Python SDK

Overview
--------
Python client library for the Beebotte IoT data platform. It signs and sends
the REST calls that read resource data, persist records and publish
transient messages, and it computes the tokens real-time clients present
when subscribing to channels.

Exports
-------
- ``BBT``: main entry point for API access
- ``Resource``: a client bound to one ``channel/resource``
- ``Endpoints`` / ``Settings``: immutable configuration values
- ``Record``: bulk write/publish item
- ``ErrorKind`` and the exception hierarchy rooted at ``BeebotteError``
"""
from .client import BBT
from .config import DEFAULT_ENDPOINTS, Endpoints, Settings
from .models import Record
from .resource import Resource
from .exceptions import (
    ErrorKind,
    BeebotteError,
    AuthenticationError,
    ParameterError,
    BadRequestError,
    DataTypeError,
    BadTypeError,
    PayloadLimitError,
    NotAllowedError,
    InternalError,
    NotFoundError,
    AlreadyExistError,
    UnexpectedError,
)

# Package semantic version. Keep in sync with packaging config in setup.py
__version__ = "1.0.0"
__all__ = [
    "BBT",
    "Resource",
    "Endpoints",
    "DEFAULT_ENDPOINTS",
    "Settings",
    "Record",
    "ErrorKind",
    "BeebotteError",
    "AuthenticationError",
    "ParameterError",
    "BadRequestError",
    "DataTypeError",
    "BadTypeError",
    "PayloadLimitError",
    "NotAllowedError",
    "InternalError",
    "NotFoundError",
    "AlreadyExistError",
    "UnexpectedError",
]
