"""Omezení počtu požadavků / Global rate limiter.

Používá slowapi, limit podle IP / Uses slowapi to limit requests per IP.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
