"""
Interfaces package.
"""
