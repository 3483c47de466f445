"""
Service context for log lines.

Identifies which ledger instance (box office laptop, door scanner, ...) wrote a line,
so logs collected from several devices stay traceable.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'festival-ledger')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    device = os.getenv('DEVICE_NAME') or socket.gethostname().split('.')[0] or 'local'

    return f'{service_name}@{deploy_env}:{device}:{os.getpid()}'
