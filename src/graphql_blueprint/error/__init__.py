"""GraphQL Blueprint Errors

The :mod:`graphql_blueprint.error` package is responsible for creating and formatting
the errors which phases attach to blueprint nodes.
"""

from .phase_error import PhaseError, format_error, print_error

__all__ = ["PhaseError", "format_error", "print_error"]
