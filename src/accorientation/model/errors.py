"""
Kernel Exceptions
=================
Degenerate input (zero-length or collinear vectors) has no geometric meaning
for the kernel, so it is reported immediately instead of leaking NaN/Inf.

Classes:
    DegenerateGeometryError: Raised on zero-length or collinear input.
"""


class DegenerateGeometryError(ZeroDivisionError):
    """
    A vector operation needed a non-zero length (or two non-parallel vectors)
    and did not get it.
    """
