"""Tests for findings and the finding catalog."""

import pytest
from knossos_sim.errors import InvalidArgumentError
from knossos_sim.models.findings import (
    Finding,
    FindingKind,
    Fresco,
    RareFinding,
    Statue,
    create_rare_finding,
    create_rare_findings,
    generate_regular_findings,
)


def test_regular_catalog_contents():
    """Test the regular catalog holds ten statues followed by six frescoes."""
    findings = generate_regular_findings()

    assert len(findings) == 16
    assert all(isinstance(f, Statue) for f in findings[:10])
    assert all(isinstance(f, Fresco) for f in findings[10:])
    assert all(f.value == 10 for f in findings[:10])
    assert [f.value for f in findings[10:]] == [20, 20, 15, 15, 15, 20]


def test_regular_catalog_is_fresh_each_call():
    """Test each call returns new finding objects."""
    first = generate_regular_findings()
    second = generate_regular_findings()

    assert all(a is not b for a, b in zip(first, second))


def test_finding_kinds():
    """Test each finding class reports its kind."""
    assert Statue(name="Statue", value=10).kind == FindingKind.STATUE
    assert Fresco(name="Fresco", value=15).kind == FindingKind.FRESCO
    assert RareFinding(name="Disc", value=25, palace="Phaistos").kind == FindingKind.RARE


def test_base_finding_is_abstract():
    with pytest.raises(TypeError):
        Finding(name="Relic", value=5)


def test_finding_validation():
    """Test findings reject empty names and negative values."""
    with pytest.raises(InvalidArgumentError, match="name cannot be empty"):
        Statue(name="", value=10)

    with pytest.raises(InvalidArgumentError, match="cannot be negative"):
        Fresco(name="Fresco", value=-1)


def test_findings_compare_by_identity():
    """Test two equal-looking findings are distinct objects."""
    a = Statue(name="Statue 1", value=10)
    b = Statue(name="Statue 1", value=10)

    assert a != b
    assert a == a


def test_fresco_photograph():
    """Test photographing a fresco is sticky."""
    fresco = Fresco(name="Fresco 1", value=20)
    assert not fresco.photographed

    fresco.photograph()
    fresco.photograph()

    assert fresco.photographed
    assert "photographed" in str(fresco)


def test_rare_findings_per_palace():
    """Test one rare finding per palace, with a fallback name."""
    rares = create_rare_findings(["Knossos", "Atlantis"])

    assert set(rares) == {"Knossos", "Atlantis"}
    assert rares["Knossos"].name == "Ring of Minos"
    assert rares["Atlantis"].name == "Treasure of Atlantis"
    assert all(r.value == 25 for r in rares.values())
    assert create_rare_finding("Malia").palace == "Malia"
