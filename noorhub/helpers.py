"""HTTP, caching and retry helpers shared by the service modules."""
import hashlib
import html
import json
import logging
import threading
import time
from functools import wraps

import requests

from . import config

log = logging.getLogger(__name__)

# Limits concurrent outbound requests across worker threads
REQUEST_SEMAPHORE = threading.Semaphore(config.MAX_CONCURRENT_REQUESTS)

USER_AGENT = "Mozilla/5.0 (compatible; NoorHub/1.0)"


def get_cache_key(func_name, params):
    """Generate a cache key from function name and parameters"""
    # Sanitize params to remove any sensitive information
    if isinstance(params, dict) and "api_key" in params:
        sanitized_params = params.copy()
        sanitized_params["api_key"] = "REDACTED"
    else:
        sanitized_params = params

    params_str = json.dumps(sanitized_params, sort_keys=True, default=str)
    key = f"{func_name}:{params_str}"
    return hashlib.md5(key.encode()).hexdigest()


def cached(expiry_seconds):
    """Decorator to cache function results with given expiry time.

    Each decorated function owns its cache, reachable as ``func.cache`` and
    emptied with ``func.cache_clear()``.
    """
    def decorator(func):
        cache = {}

        @wraps(func)
        def wrapper(*args, **kwargs):
            params = {
                "args": args,
                "kwargs": kwargs
            }
            cache_key = get_cache_key(func.__name__, params)

            if cache_key in cache:
                cache_entry = cache[cache_key]
                if time.time() - cache_entry["timestamp"] < expiry_seconds:
                    return cache_entry["data"]

            result = func(*args, **kwargs)

            if result is not None:
                cache[cache_key] = {
                    "timestamp": time.time(),
                    "data": result
                }

            return result

        wrapper.cache = cache
        wrapper.cache_clear = cache.clear
        return wrapper
    return decorator


def retry_request(func):
    """Decorator to retry failed requests with linear backoff"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        retries = 0
        last_exception = None

        while retries < config.MAX_RETRIES:
            try:
                return func(*args, **kwargs)
            except requests.RequestException as e:
                last_exception = e
                retries += 1
                if retries < config.MAX_RETRIES:
                    time.sleep(config.RETRY_DELAY * retries)

        log.error("%s failed after %d attempts: %s", func.__name__, config.MAX_RETRIES, last_exception)
        return None
    return wrapper


def fetch_json(url, params=None, timeout=None):
    """GET a JSON document, raising ``requests.RequestException`` on failure"""
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    with REQUEST_SEMAPHORE:
        response = requests.get(
            url,
            params=params,
            headers=headers,
            timeout=timeout or config.REQUEST_TIMEOUT,
        )
    response.raise_for_status()
    return response.json()


def sanitize_input(text):
    """Sanitize user input to prevent injection attacks"""
    if text is None:
        return ""
    return html.escape(text).strip()
