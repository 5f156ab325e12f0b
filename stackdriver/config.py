"""
Configuration settings for the Stackdriver client.
"""
import os

# Authentication
API_KEY = os.getenv('STACKDRIVER_API_KEY', '')
CUSTOMER_ID = os.getenv('STACKDRIVER_CUSTOMER_ID') or None

# Gateway endpoints
CUSTOM_METRIC_URL = os.getenv('STACKDRIVER_CUSTOM_METRIC_URL', 'https://custom-gateway.stackdriver.com/v1/custom')
ANNOTATION_EVENT_URL = os.getenv('STACKDRIVER_ANNOTATION_EVENT_URL', 'https://event-gateway.stackdriver.com/v1/annotationevent')
DEPLOY_EVENT_URL = os.getenv('STACKDRIVER_DEPLOY_EVENT_URL', 'https://event-gateway.stackdriver.com/v1/deployevent')

USER_AGENT = 'Python Stackdriver API Library'

# Custom metrics protocol
API_PROTOCOL_VERSION = 1
MAX_METRIC_AGE = 3600  # seconds

# Annotation messages longer than this are truncated
MAX_MESSAGE_LENGTH = 256

# HTTP client configuration
REQUEST_TIMEOUT = float(os.getenv('STACKDRIVER_REQUEST_TIMEOUT', '30'))  # seconds
MAX_ATTEMPTS = int(os.getenv('STACKDRIVER_MAX_ATTEMPTS', '1'))  # 1 means no retry
RETRY_DELAY = float(os.getenv('STACKDRIVER_RETRY_DELAY', '5'))  # seconds

# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
