"""HTTP service building blocks: request logging, validation, multipart upload readers and MySQL record helpers."""

__version__ = "0.1.0"