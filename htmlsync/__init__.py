"""htmlsync — synchronizacja nagłówka i stopki HTML między plikami katalogu."""

__version__ = "1.0.0"
