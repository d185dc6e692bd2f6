"""
Extractors module for contact signal extraction.
"""

from .contact_extractor import ContactExtractor, extract
from .signals import Contact, ContactSignals

__all__ = ['ContactExtractor', 'extract', 'Contact', 'ContactSignals']
