"""AstraX: résumé-driven internship matching with a recruiter portal."""

__version__ = "0.1.0"
