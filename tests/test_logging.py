"""Tests for logging hygiene."""

import pytest

from typology.core.errors import InvalidTypeCodeError
from typology.engine.graph import RuleGraph, rule
from typology.engine.profile import derive_profile


def test_resolution_logs_at_debug_not_stdout(capsys, caplog):
    with caplog.at_level("DEBUG", logger="typology"):
        derive_profile("INTP")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert "Deriving profile for INTP" in caplog.text
    assert "Resolved" in caplog.text


def test_graph_construction_logged(caplog):
    @rule()
    def echo(code):
        return code

    with caplog.at_level("DEBUG", logger="typology.engine.graph"):
        RuleGraph([echo], inputs=("code",))
    assert "Built rule graph with 1 rules" in caplog.text


def test_rejected_code_logged(caplog):
    with caplog.at_level("DEBUG", logger="typology.engine.decoder"):
        with pytest.raises(InvalidTypeCodeError):
            derive_profile("IXTP")
    assert "Rejected type code 'IXTP' at position 1" in caplog.text
