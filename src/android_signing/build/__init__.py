"""
Build package for android-signing.

This package contains the signing configuration loaders and their invoke tasks.
"""
