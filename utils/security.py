"""
Security Module - Client identification, rate limiting and the shared-secret gate
"""

import hmac
import math
import threading
import time
from flask import request, current_app


def get_client_ip():
    """
    Get the client address of the current request

    Only the socket address is trusted. Behind a reverse proxy the app
    factory wraps the app in ProxyFix, which rewrites REMOTE_ADDR from the
    configured number of trusted X-Forwarded-For hops.
    """
    return request.remote_addr or 'unknown'


class RateLimiter:
    """
    Sliding-window request counter keyed by client address

    Counters live in process memory only. check_and_record() prunes,
    checks and records under one lock so concurrent requests from the
    same client cannot slip past the limit. Keys whose requests have all
    left the window are swept at most once per window.
    """

    def __init__(self, max_requests=2, window=600, clock=None):
        self.max_requests = max_requests
        self.window = window
        self.clock = clock or time.monotonic
        self._requests = {}  # {(client, endpoint): [timestamp, ...]}
        self._last_sweep = None
        self._lock = threading.Lock()

    def init_app(self, app):
        self.max_requests = app.config.get('RATE_LIMIT_MAX_REQUESTS', self.max_requests)
        self.window = app.config.get('RATE_LIMIT_WINDOW', self.window)
        self.reset()
        app.extensions['rate_limiter'] = self

    @property
    def tracked_clients(self):
        return len(self._requests)

    def check_and_record(self, client, endpoint='contact'):
        """
        Count one request for client and decide whether it may proceed

        Returns:
            tuple: (allowed, retry_after) where retry_after is the number of
            seconds until a slot frees up, or 0 when the request is allowed
        """
        key = (client, endpoint)
        with self._lock:
            now = self.clock()
            self._sweep(now)
            timestamps = [ts for ts in self._requests.get(key, []) if now - ts < self.window]

            if len(timestamps) >= self.max_requests:
                self._requests[key] = timestamps
                retry_after = max(1, math.ceil(self.window - (now - timestamps[0])))
                return False, retry_after

            timestamps.append(now)
            self._requests[key] = timestamps
            return True, 0

    def _sweep(self, now):
        """Drop keys with no request inside the window; caller holds the lock"""
        if self._last_sweep is not None and now - self._last_sweep < self.window:
            return
        self._last_sweep = now
        stale = [key for key, timestamps in self._requests.items()
                 if not timestamps or now - timestamps[-1] >= self.window]
        for key in stale:
            del self._requests[key]

    def reset(self):
        with self._lock:
            self._requests.clear()
            self._last_sweep = None


def check_rate_limit(endpoint='contact'):
    """Check if the current request's client is within its rate limit"""
    limiter = current_app.extensions['rate_limiter']
    return limiter.check_and_record(get_client_ip(), endpoint)


def verify_shared_secret(candidate, expected=None):
    """
    Compare the submitted shared secret against the configured one

    A server without a configured secret rejects everything.
    """
    if expected is None:
        expected = current_app.config.get('CONTACT_SHARED_SECRET')
    if not expected or candidate is None:
        return False
    return hmac.compare_digest(str(candidate).encode('utf-8'), str(expected).encode('utf-8'))


__all__ = [
    'get_client_ip',
    'RateLimiter',
    'check_rate_limit',
    'verify_shared_secret',
]
