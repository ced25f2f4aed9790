"""adascan — accessibility compliance reports for web pages and PDFs."""

__version__ = "0.1.0"
