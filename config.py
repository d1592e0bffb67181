"""
Configuration for the URL redirection validator
"""
from pathlib import Path

# Output
RESULT_CSV = Path("result.csv")
CSV_HEADER = [
    "Request Id",
    "Redirection URL",
    "Destination URL",
    "Final Destination URL",
    "Final Status",
]

# Navigation settings
SETTLE_SECONDS = 3.0  # wait after navigation for redirects to finish
TASK_DELAY = 0.1  # seconds between tasks
NAVIGATION_TIMEOUT = 30000  # ms, only for the navigation to commit
RESET_BETWEEN_TASKS = True  # load about:blank before each task

# Browser settings
HEADLESS = False
CHROMIUM_ARGS = [
    "--disable-features=IsolateOrigins,site-per-process",
    "--disable-web-security",
    "--allow-running-insecure-content",
    "--disable-extensions",
    "--ignore-certificate-errors",
    "--disable-notifications",
    "--disable-popup-blocking",
    "--disable-usb-device-redirector",
]

# Logging
LOG_DIR = Path("logs")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = 'DEBUG'
CONSOLE_LOG_LEVEL = 'INFO'
