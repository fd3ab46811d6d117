"""Codec registry and binary codecs for registration and branch transaction messages."""