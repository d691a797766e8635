"""
Pydantic models for signing configuration.
"""
from pathlib import Path
from typing import Dict, List, Optional, Any
from pydantic import BaseModel


MASK = "********"

IDENTITY_FIELDS = ('key_alias', 'key_password', 'store_file', 'store_password')


class PropertyFile(BaseModel):
    """Ordered key/value pairs read from a properties file."""
    path: Optional[Path] = None  # None when the file was not found
    entries: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    @property
    def is_empty(self) -> bool:
        return not self.entries


class SigningIdentity(BaseModel):
    """Credentials and keystore location used to sign a release build."""
    key_alias: Optional[str] = None
    key_password: Optional[str] = None
    store_file: Optional[Path] = None
    store_password: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True if no field is set."""
        return len(self.missing_fields()) == len(IDENTITY_FIELDS)

    @property
    def is_complete(self) -> bool:
        """True if every field is set."""
        return not self.missing_fields()

    def missing_fields(self) -> List[str]:
        return [name for name in IDENTITY_FIELDS if getattr(self, name) is None]

    def masked(self) -> Dict[str, Any]:
        """Dictionary form with passwords hidden."""
        data = self.to_dict()
        for name in ('key_password', 'store_password'):
            if data[name] is not None:
                data[name] = MASK
        return data

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        if self.store_file is not None:
            data['store_file'] = str(self.store_file)
        return data


class ToolchainVersions(BaseModel):
    """SDK and version values published by the Flutter toolchain, passed through unchanged."""
    compile_sdk: Optional[str] = None
    min_sdk: Optional[str] = None
    target_sdk: Optional[str] = None
    ndk_version: Optional[str] = None
    version_code: Optional[str] = None
    version_name: Optional[str] = None


class AndroidConfig(BaseModel):
    """Release packaging configuration handed to the host build tool."""
    namespace: str
    application_id: str
    java_version: str = "11"
    versions: ToolchainVersions = ToolchainVersions()
    signing_configs: Dict[str, SigningIdentity] = {}
    build_types: Dict[str, str] = {}  # build type -> signing config name

    def signing_config_for(self, build_type: str) -> Optional[SigningIdentity]:
        name = self.build_types.get(build_type)
        if name is None:
            return None
        return self.signing_configs.get(name)

    def to_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        return {
            'namespace': self.namespace,
            'application_id': self.application_id,
            'java_version': self.java_version,
            'versions': self.versions.model_dump(),
            'signing_configs': {
                name: identity.masked() if mask_secrets else identity.to_dict()
                for name, identity in self.signing_configs.items()
            },
            'build_types': dict(self.build_types),
        }
