"""latest-zipalign - locate the newest Android SDK build tool binary."""

__version__ = "0.1.0"
