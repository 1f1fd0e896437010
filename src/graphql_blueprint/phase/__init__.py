"""GraphQL Blueprint Phases

The :mod:`graphql_blueprint.phase` package provides the base for the phases which
process a blueprint one step at a time.
"""

from .phase import Phase, PhaseResult, Status

__all__ = ["Phase", "PhaseResult", "Status"]
