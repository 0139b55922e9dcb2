"""Finding models for Knossos Sim."""

from .finding import Finding, FindingKind, RareFinding, Statue, Fresco
from .catalog import generate_regular_findings, create_rare_finding, create_rare_findings

__all__ = [
    "Finding",
    "FindingKind",
    "RareFinding",
    "Statue",
    "Fresco",
    "generate_regular_findings",
    "create_rare_finding",
    "create_rare_findings",
]
