"""
Arbitrary-precision signed integers.

Sign-magnitude representation over 64-bit words, schoolbook arithmetic,
hexadecimal and decimal text forms, JSON contract validation.
"""
