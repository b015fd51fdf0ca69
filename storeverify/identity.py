"""Caller identity."""

# Opaque, equality-comparable token supplied by the execution environment.
# The registry never inspects it beyond ``==``.
Principal = str
