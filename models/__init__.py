"""
========================================
Entity models and the CRUD service.
========================================

Modules:
    base: Model base class and common column-name constants
    service: ModelService, CRUD operations built on the statement builders

Example:
    >>> from models.base import Model
    >>> from models.service import ModelService
"""

__version__ = "0.1.0"
__all__ = ['base', 'service']

# Note: Eager imports removed to prevent circular dependencies.
# sqlbuilder imports models.base, and models.service imports sqlbuilder.
# Import modules directly when needed:
#   from models.base import Model, ID_COLUMN
#   from models.service import ModelService
