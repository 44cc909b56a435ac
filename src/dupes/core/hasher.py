"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Full-content hashing with pluggable hash algorithms.

Files are streamed through a fixed-size buffer, so memory use does not
depend on file size, and the digest does not depend on how the I/O layer
splits the data into chunks.
"""

import hashlib
from typing import BinaryIO, Dict, Optional

import xxhash

from dupes.core.interfaces import ContentHasher, HashAlgorithm, HashAccumulator
from dupes.core.models import HashAlgorithmName

DEFAULT_CHUNK_SIZE = 8192


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    def new(self) -> HashAccumulator:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxhash"

    def new(self) -> HashAccumulator:
        return xxhash.xxh64()


ALGORITHMS: Dict[HashAlgorithmName, HashAlgorithm] = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl(),
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl(),
}


class ContentHasherImpl(ContentHasher):
    """
    Computes the digest of a file's complete byte stream.
    Read errors propagate to the caller; no partial digest is ever returned.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    @classmethod
    def for_algorithm(cls, name: HashAlgorithmName) -> "ContentHasherImpl":
        return cls(ALGORITHMS[name])

    def hash_stream(self, stream: BinaryIO) -> bytes:
        accumulator = self.algorithm.new()
        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            accumulator.update(chunk)
        return accumulator.digest()

    def hash_file(self, path: str) -> bytes:
        with open(path, 'rb') as f:
            return self.hash_stream(f)


def digest_label(digest: bytes) -> str:
    """Uppercase hexadecimal rendering of a digest."""
    return digest.hex().upper()
