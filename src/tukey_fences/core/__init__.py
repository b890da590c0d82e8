"""
Core numeric primitives, error taxonomy, report models, and contracts.

Everything here is pure and independent of the detection pipeline.
"""
