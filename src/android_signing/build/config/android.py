"""
Android app module configuration.

Assembles what the host build tool needs for the app module: identifiers,
toolchain versions forwarded from Flutter, and the release signing config.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from .models import AndroidConfig
from .settings import Settings
from .signing import load_signing_identity, resolve_release_signing
from .toolchain import load_toolchain_versions

logger = logging.getLogger(__name__)

RELEASE = 'release'


def build_android_config(root_dir: Union[str, Path], settings: Optional[Settings] = None,
                         release: bool = False) -> AndroidConfig:
    """Assemble the AndroidConfig for the project at root_dir.

    Args:
        root_dir: Android project root (where key.properties lives)
        settings: Signing settings, loaded from root_dir when omitted
        release: Apply the release policy to the signing identity

    Raises:
        UnresolvedSigningException: If release is set, the identity is
            incomplete and the policy is 'fail'
    """
    root_dir = Path(root_dir)
    if settings is None:
        settings = Settings.load(root_dir)

    identity, found = load_signing_identity(root_dir, settings.properties_file)
    if release:
        identity = resolve_release_signing(
            identity, settings.release_policy, file_name=settings.properties_file
        )

    config = AndroidConfig(
        namespace=settings.namespace,
        application_id=settings.application_id,
        java_version=settings.java_version,
        versions=load_toolchain_versions(root_dir, settings.toolchain_file),
        signing_configs={RELEASE: identity},
        build_types={RELEASE: RELEASE},
    )
    logger.debug(f"Android config for {config.application_id} (key file found: {found})")
    return config
