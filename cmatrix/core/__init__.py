"""
Core module: backing grid types and the matrix error taxonomy.
"""
