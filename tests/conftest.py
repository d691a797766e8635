"""
Root pytest configuration for android-signing.
"""

# Auto-bootstrap logging for all tests
from android_signing.run.config.logging import bootstrap_logging
bootstrap_logging()
