# core/errors.py


class ConfigurationError(ValueError):
    """Render settings that the kernel cannot work with."""


class UnsupportedMaterialError(ValueError):
    """A scene description names a material kind that does not exist."""

    def __init__(self, kind: str):
        super().__init__(f"Unsupported material kind: {kind!r}")
        self.kind = kind


class SceneFormatError(ValueError):
    """A scene description is structurally broken."""
