"""Factory functions for the fixed finding catalog."""

from typing import Dict, Iterable, List

from .finding import Finding, Fresco, RareFinding, Statue
from ...constants import (
    FRESCO_VALUES,
    RARE_FINDING_NAMES,
    RARE_FINDING_VALUE,
    STATUE_COUNT,
    STATUE_VALUE,
)


def generate_regular_findings() -> List[Finding]:
    """Return a fresh set of statues and frescoes, statues first."""
    findings: List[Finding] = []
    
    for i in range(STATUE_COUNT):
        findings.append(Statue(name=f"Statue {i + 1}", value=STATUE_VALUE))
    
    for i, value in enumerate(FRESCO_VALUES):
        findings.append(Fresco(name=f"Fresco {i + 1}", value=value))
    
    return findings


def create_rare_finding(palace: str) -> RareFinding:
    """Create the rare finding for a palace, falling back to a generic name."""
    name = RARE_FINDING_NAMES.get(palace, f"Treasure of {palace}")
    return RareFinding(name=name, value=RARE_FINDING_VALUE, palace=palace)


def create_rare_findings(palaces: Iterable[str]) -> Dict[str, RareFinding]:
    """Create one rare finding per palace, keyed by palace name."""
    return {palace: create_rare_finding(palace) for palace in palaces}
