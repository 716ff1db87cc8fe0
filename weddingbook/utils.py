# utils.py
"""
Logging setup and small UI helpers
"""

import os
import logging
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime


def get_log_dir():
    """Log folder in AppData/Local/WeddingBook (or its equivalent under home)"""
    appdata_local = os.environ.get('LOCALAPPDATA', os.path.join(os.path.expanduser('~'), 'AppData', 'Local'))
    return os.path.join(appdata_local, 'WeddingBook')


# Set up logging with both console and daily rotating file
def setup_logging(log_dir=None):
    log_dir = log_dir or get_log_dir()
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Daily rotation using WeddingBook-YYYY-MM-DD.log names
    today = datetime.now().strftime('%Y-%m-%d')
    log_filename = os.path.join(log_dir, f'WeddingBook-{today}.log')
    file_handler = TimedRotatingFileHandler(
        log_filename,
        when='midnight',
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    def custom_namer(default_name):
        # WeddingBook-2025-07-02.log.2025-07-03 -> WeddingBook-2025-07-03.log
        base_dir = os.path.dirname(default_name)
        parts = os.path.basename(default_name).split('.')
        if len(parts) >= 2:
            return os.path.join(base_dir, f'WeddingBook-{parts[-1]}.log')
        return default_name

    file_handler.namer = custom_namer
    root_logger.addHandler(file_handler)
    return log_filename


def darken_color(color):
    """Darken a hex color by 20%"""
    color = color.lstrip('#')
    rgb = tuple(int(color[i:i+2], 16) for i in (0, 2, 4))
    darkened = tuple(int(c * 0.8) for c in rgb)
    return '#%02x%02x%02x' % darkened
