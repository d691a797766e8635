"""Task definitions for android-signing.

Direct task imports for simplicity; a project's own tasks.py can re-export
these to make them available to invoke.
"""

from android_signing.build.tasks.signing import signing_show, signing_check, android_config  # noqa: F401
