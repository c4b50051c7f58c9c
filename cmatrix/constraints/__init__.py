"""
Constraints module: comparison constraints and validation dispatch.
"""
