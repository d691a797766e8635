"""
Signing configuration for the Android app module.
"""

from .models import PropertyFile, SigningIdentity, ToolchainVersions, AndroidConfig
from .properties import load_properties, parse_properties
from .signing import (
    ReleasePolicy,
    derive_identity,
    load_signing_identity,
    resolve_release_signing,
)
from .toolchain import load_toolchain_versions
from .settings import Settings
from .android import build_android_config


__all__ = [
    'PropertyFile',
    'SigningIdentity',
    'ToolchainVersions',
    'AndroidConfig',
    'load_properties',
    'parse_properties',
    'ReleasePolicy',
    'derive_identity',
    'load_signing_identity',
    'resolve_release_signing',
    'load_toolchain_versions',
    'Settings',
    'build_android_config',
]
