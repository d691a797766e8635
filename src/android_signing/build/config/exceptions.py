"""
Exception classes with built-in guidance for signing configuration.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, file_name: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.file_name = file_name
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class MalformedPropertiesException(ConfigException):
    """Raised when a properties file contains an invalid escape sequence."""
    def __init__(self, message: str, line_number: int = None, **kwargs):
        self.line_number = line_number
        super().__init__(message, error_type="malformed_properties", **kwargs)

    def _generate_guidance(self):
        where = f" {self.file_name}" if self.file_name else ""
        if self.line_number:
            where += f" on line {self.line_number}"
        return f"""
❌ Could not parse properties file{where}: {self}
💡 Unicode escapes must have the form \\uXXXX with four hex digits
"""


class UnresolvedSigningException(ConfigException):
    """Raised when a release build is requested but the signing identity is incomplete."""
    def __init__(self, message: str, missing_fields: list = None, **kwargs):
        self.missing_fields = missing_fields or []
        super().__init__(message, error_type="unresolved_signing", **kwargs)

    def _generate_guidance(self):
        file_name = self.file_name or 'key.properties'
        missing = ', '.join(self.missing_fields) if self.missing_fields else 'Unknown'
        return f"""
❌ Release signing is not configured: {self}

Missing properties: {missing}

💡 Resolve this in one of the following ways:
   1. Create {file_name} in the Android project root with:
        storePassword=<keystore password>
        keyPassword=<key password>
        keyAlias=upload
        storeFile=<path to keystore, relative to the project root>
   2. Or allow debug signing for local release builds:
        export SIGNING_RELEASE_POLICY=debug
"""


class SettingsException(ConfigException):
    """Raised when signing.yaml or the environment holds invalid settings."""
    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type="settings", **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        return f"""
❌ Invalid signing settings: {self}
💡 Fix signing.yaml or the SIGNING_* environment variables, then rerun: {command}
"""
