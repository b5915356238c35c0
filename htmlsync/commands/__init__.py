"""Komendy CLI htmlsync."""
