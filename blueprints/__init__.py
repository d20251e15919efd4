"""
Blueprints Package - Modular application structure
Each blueprint handles a specific part of the portfolio
"""

__all__ = ['pages', 'blog']
