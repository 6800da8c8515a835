"""Audio decoding and media normalization."""
from .normalizer import normalize_media
from .pcm import decode_wav, encode_wav

__all__ = ["normalize_media", "decode_wav", "encode_wav"]
