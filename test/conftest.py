"""
Test Configuration

Environment setup MUST happen before any application import: settings and
the loguru sinks read environment variables at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('POSTGRES_DB', 'hotel_booking_test_db')
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')
    os.environ.setdefault('DB_POOL_SIZE_WRITE', '2')
    os.environ.setdefault('DB_POOL_SIZE_READ', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


_early_setup_test_environment()
