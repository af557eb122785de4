"""Custom exceptions for assetscout."""


class AssetScoutError(Exception):
    """Base exception for assetscout."""


class ConfigError(AssetScoutError):
    """Configuration is missing, malformed, or points at a missing root."""


class MissingPackageWarning(UserWarning):
    """A named package directory does not exist.

    Reported through a Reporter, never raised.
    """

    def __init__(self, package_type: str, name: str, suggestion: str | None = None):
        self.package_type = package_type
        self.name = name
        self.suggestion = suggestion
        message = (
            f"The {name} {package_type} does not exist in your codebase. "
            f"No assets will be compiled for this {package_type}."
        )
        if suggestion is not None:
            message += f" Did you mean '{suggestion}'?"
        super().__init__(message)
