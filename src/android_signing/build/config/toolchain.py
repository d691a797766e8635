"""
Flutter toolchain values for the Android module.

The Flutter tool writes SDK and version numbers into local.properties; they are
forwarded to the Android configuration unchanged.
"""
from pathlib import Path
from typing import Union

from .models import ToolchainVersions
from .properties import load_properties

FLUTTER_KEYS = {
    'compile_sdk': 'flutter.compileSdkVersion',
    'min_sdk': 'flutter.minSdkVersion',
    'target_sdk': 'flutter.targetSdkVersion',
    'ndk_version': 'flutter.ndkVersion',
    'version_code': 'flutter.versionCode',
    'version_name': 'flutter.versionName',
}


def load_toolchain_versions(root_dir: Union[str, Path],
                            file_name: str = 'local.properties') -> ToolchainVersions:
    """Read Flutter SDK/version values from root_dir/file_name."""
    props, _ = load_properties(
        root_dir, file_name, missing_hint="Run 'flutter pub get' to generate it."
    )
    return ToolchainVersions(**{
        field_name: props.get(key) for field_name, key in FLUTTER_KEYS.items()
    })
