"""Application ports - interfaces for external adapters."""

from taxoseed.application.ports.definition_source import DefinitionSource
from taxoseed.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "DefinitionSource",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
