"""recordkeeper: validation and attendance statistics for record-keeping apps.

The package groups the pieces shared by the HR attendance system and the
internship management prototype: field rules and form validation
(`recordkeeper.validation`), attendance statistics (`recordkeeper.stats`),
and the repository-backed services that call them (`recordkeeper.services`).
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
