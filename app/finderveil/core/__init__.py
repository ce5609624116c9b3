"""Core workflow modules for finderveil.

The hide workflow is strictly linear: privilege gate, target resolution,
batch attribute setting, and report finalization.
"""
