"""GraphQL Blueprint Validation

The :mod:`graphql_blueprint.validation` package contains the phases validating a
blueprint before it is executed.
"""

from .no_fragment_cycles import NoFragmentCycles

__all__ = ["NoFragmentCycles"]
