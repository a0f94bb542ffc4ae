"""
Photostat Commons Library

Shared configuration, logging, contracts, services and the guest client for
the photostat upload and notification functions.
"""

__version__ = "1.0.0"
