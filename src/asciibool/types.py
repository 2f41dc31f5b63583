"""
Core types for token matching.
"""

type Byte = int
type ByteSeq = bytes
type ByteLike = int | bytes | bytearray
type ByteSeqLike = bytes | bytearray | memoryview
