"""
Release signing identity derivation.

The identity is derived from an explicitly passed PropertyFile rather than from
module state, so each build invocation loads once and derives once.
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from .exceptions import SettingsException, UnresolvedSigningException
from .models import PropertyFile, SigningIdentity
from .properties import load_properties

logger = logging.getLogger(__name__)

DEFAULT_KEY_FILE = 'key.properties'

KEY_ALIAS = 'keyAlias'
KEY_PASSWORD = 'keyPassword'
STORE_FILE = 'storeFile'
STORE_PASSWORD = 'storePassword'


class ReleasePolicy(str, Enum):
    """What to do when a release build has no usable signing identity."""
    FAIL = 'fail'
    DEBUG = 'debug'


def parse_release_policy(value) -> ReleasePolicy:
    """Convert a policy name (any case) or ReleasePolicy into a ReleasePolicy.

    Raises:
        SettingsException: If the name is not a known policy
    """
    if isinstance(value, ReleasePolicy):
        return value
    try:
        return ReleasePolicy(str(value).strip().lower())
    except ValueError:
        allowed = [p.value for p in ReleasePolicy]
        raise SettingsException(f"Unknown release policy '{value}'. Available: {allowed}")


def debug_identity(home: Optional[Path] = None) -> SigningIdentity:
    """The identity Android tooling generates for debug builds."""
    home = Path.home() if home is None else Path(home)
    return SigningIdentity(
        key_alias='androiddebugkey',
        key_password='android',
        store_file=home / '.android' / 'debug.keystore',
        store_password='android',
    )


def derive_identity(props: PropertyFile, root_dir: Union[str, Path]) -> SigningIdentity:
    """Build a SigningIdentity from signing properties.

    storeFile is joined onto root_dir without checking that it exists; an empty
    storeFile counts as not given. Other keys are copied verbatim.
    """
    store_file = props.get(STORE_FILE)
    return SigningIdentity(
        key_alias=props.get(KEY_ALIAS),
        key_password=props.get(KEY_PASSWORD),
        store_file=Path(root_dir) / store_file if store_file else None,
        store_password=props.get(STORE_PASSWORD),
    )


def load_signing_identity(root_dir: Union[str, Path],
                          file_name: str = DEFAULT_KEY_FILE) -> Tuple[SigningIdentity, bool]:
    """Load the key file under root_dir and derive the identity from it.

    Returns:
        Tuple of (SigningIdentity, found)
    """
    props, found = load_properties(root_dir, file_name)
    return derive_identity(props, root_dir), found


def resolve_release_signing(identity: SigningIdentity,
                            policy: ReleasePolicy = ReleasePolicy.FAIL,
                            fallback: Optional[SigningIdentity] = None,
                            file_name: str = DEFAULT_KEY_FILE) -> SigningIdentity:
    """Pick the identity a release build signs with.

    Raises:
        UnresolvedSigningException: If the identity is incomplete and policy is FAIL
        SettingsException: If policy is not a known policy name
    """
    policy = parse_release_policy(policy)
    if identity.is_complete:
        return identity

    missing = identity.missing_fields()
    if policy is ReleasePolicy.FAIL:
        raise UnresolvedSigningException(
            f"Release signing identity is incomplete ({len(missing)} of 4 properties missing)",
            missing_fields=missing,
            file_name=file_name,
        )

    logger.warning(f"Signing release build with the debug keystore; missing: {', '.join(missing)}")
    return fallback if fallback is not None else debug_identity()
