"""Remote OSS: resolve remote host authorities to connection parameters."""

__version__ = "0.1.0"
