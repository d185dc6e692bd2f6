"""
Utilities module for common functionality.
"""

from .config import Config
from .exceptions import ContactExtractorError, InvalidSourceUrlError, FetchError
from .logger import setup_logging, LoggerMixin
from .validators import validate_url, derive_domain
from .progress_tracker import ProgressTracker
from .text_processing import TextProcessor, unique_in_order
from .patterns import SanitizePatterns, EmailPatterns, PhonePatterns, SocialPatterns, DocumentPatterns

__all__ = [
    'Config',
    'ContactExtractorError',
    'InvalidSourceUrlError',
    'FetchError',
    'setup_logging',
    'LoggerMixin',
    'validate_url',
    'derive_domain',
    'ProgressTracker',
    'TextProcessor',
    'unique_in_order',
    'SanitizePatterns',
    'EmailPatterns',
    'PhonePatterns',
    'SocialPatterns',
    'DocumentPatterns'
]
