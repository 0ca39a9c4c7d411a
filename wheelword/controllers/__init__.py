"""
Controllers Package

HTTP blueprints for the WheelWord service.
"""

from .wheelword_controller import wheelword_bp

__all__ = ['wheelword_bp']
