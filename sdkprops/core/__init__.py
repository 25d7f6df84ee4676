"""
Core module
"""
