from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for every failure that aborts a conversion."""


class IoError(ConversionError):
    """A source or destination file could not be opened, read or written."""


class InvalidHeader(ConversionError, ValueError):
    """Declared bitmap dimensions are non-positive or absurd."""


class TruncatedData(ConversionError, ValueError):
    """Fewer bytes are available than the header declares."""


class UnsupportedDepth(ConversionError, ValueError):
    """Per-channel bit depth outside 1..3."""


class MifFormatError(ConversionError, ValueError):
    """A MIF document could not be parsed."""


class UnknownTarget(ConversionError, LookupError):
    """No target profile or resampling policy with the requested name."""
