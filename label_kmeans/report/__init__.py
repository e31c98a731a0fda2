"""
Reporting module: renders K-Means iterations as text.
"""

from .reporter import Reporter, format_iteration

__all__ = ['Reporter', 'format_iteration']
