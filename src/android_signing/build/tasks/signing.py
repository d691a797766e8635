"""
Signing configuration tasks.

Print the signing identity and Android configuration derived from the project's
properties files. Parseable YAML goes to stdout, diagnostics to stderr.
"""

import sys
import logging
from pathlib import Path

import yaml
from invoke import task

from android_signing.build.config.exceptions import ConfigException
from android_signing.run.config.logging import bootstrap_logging

logger = logging.getLogger(__name__)


def _handle_config_error(e: ConfigException):
    """Handle configuration errors with built-in guidance."""
    print(e.guidance, file=sys.stderr)
    sys.exit(1)


def _resolve_root(root):
    return Path(root) if root else Path.cwd()


@task(help={
    'root': 'Android project root (default: current directory)',
    'reveal': 'Show passwords instead of masking them',
})
def signing_show(ctx, root=None, reveal=False):
    """
    Show the release signing identity derived from key.properties.

    Examples:
        invoke signing-show --root=android
        SIGNING_PROPERTIES_FILE=upload.properties invoke signing-show
    """
    bootstrap_logging()
    from android_signing.build.config.settings import Settings
    from android_signing.build.config.signing import load_signing_identity

    root_dir = _resolve_root(root)
    try:
        settings = Settings.load(root_dir)
        identity, found = load_signing_identity(root_dir, settings.properties_file)
    except ConfigException as e:
        _handle_config_error(e)

    print(f"🔍 Signing properties: {root_dir / settings.properties_file}", file=sys.stderr)
    print(f"📄 Found: {'yes' if found else 'no'}", file=sys.stderr)
    if identity.is_complete:
        print("✅ Release signing identity is complete", file=sys.stderr)
    else:
        print(f"⚠️  Missing: {', '.join(identity.missing_fields())}", file=sys.stderr)

    data = identity.to_dict() if reveal else identity.masked()
    yaml.dump({'release': data}, sys.stdout, default_flow_style=False, sort_keys=False)


@task(help={
    'root': 'Android project root (default: current directory)',
})
def signing_check(ctx, root=None):
    """
    Exit non-zero unless a complete release signing identity is configured.

    Examples:
        invoke signing-check --root=android
    """
    bootstrap_logging()
    from android_signing.build.config.settings import Settings
    from android_signing.build.config.signing import ReleasePolicy, load_signing_identity, resolve_release_signing

    root_dir = _resolve_root(root)
    try:
        settings = Settings.load(root_dir)
        identity, _ = load_signing_identity(root_dir, settings.properties_file)
        resolve_release_signing(identity, ReleasePolicy.FAIL, file_name=settings.properties_file)
    except ConfigException as e:
        _handle_config_error(e)

    print("✅ Release signing identity is complete", file=sys.stderr)


@task(help={
    'root': 'Android project root (default: current directory)',
    'release': 'Apply the release signing policy',
    'reveal': 'Show passwords instead of masking them',
})
def android_config(ctx, root=None, release=False, reveal=False):
    """
    Show the Android app module configuration.

    Examples:
        invoke android-config --root=android
        invoke android-config --root=android --release
    """
    bootstrap_logging()
    from android_signing.build.config.android import build_android_config

    root_dir = _resolve_root(root)
    try:
        config = build_android_config(root_dir, release=release)
    except ConfigException as e:
        _handle_config_error(e)

    print(f"✅ Configuration assembled for {config.application_id}", file=sys.stderr)
    yaml.dump(config.to_dict(mask_secrets=not reveal), sys.stdout,
              default_flow_style=False, sort_keys=False)
