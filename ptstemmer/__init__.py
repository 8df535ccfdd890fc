"""ptstemmer - Snowball stemming for Portuguese"""

__version__ = "0.1.0"
