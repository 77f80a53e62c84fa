"""Unit tests for the ReputationRecord model and protocol tables."""

import dataclasses

import pytest

from httpbl.models.reputation_record import (
    NOT_FOUND,
    SEARCH_ENGINES,
    ReputationRecord,
    VisitorType,
)


def test_visitor_type_values():
    """Test visitor type bits match the HTTP:BL bit table."""
    assert VisitorType.SUSPICIOUS == 1
    assert VisitorType.HARVESTER == 2
    assert VisitorType.COMMENT_SPAMMER == 4


def test_search_engine_table():
    """Test the search engine table has 13 entries in protocol order."""
    assert len(SEARCH_ENGINES) == 13
    assert SEARCH_ENGINES[0] == "Undocumented"
    assert SEARCH_ENGINES[5] == "Google"
    assert SEARCH_ENGINES[12] == "Miscellaneous"


def test_not_found_sentinel():
    assert NOT_FOUND == "127.0.0.1"


def test_record_is_immutable():
    """Test a record cannot be modified after construction."""
    record = ReputationRecord(
        found=True, last_activity_days=1, threat_score=80, visitor_type_bits=1
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.threat_score = 0


def test_has_flag():
    record = ReputationRecord(
        found=True, last_activity_days=3, threat_score=10, visitor_type_bits=5
    )

    assert record.has_flag(VisitorType.SUSPICIOUS) is True
    assert record.has_flag(VisitorType.HARVESTER) is False
    assert record.has_flag(VisitorType.COMMENT_SPAMMER) is True
    assert record.is_search_engine() is False
    assert record.visitor_types() == ["suspicious", "comment_spammer"]


def test_has_flag_requires_record():
    """Test flags read False when there is no record."""
    record = ReputationRecord(
        found=False, last_activity_days=0, threat_score=0, visitor_type_bits=1
    )

    assert record.has_flag(VisitorType.SUSPICIOUS) is False
    assert record.is_search_engine() is False
    assert record.visitor_types() == []


def test_search_engine_record():
    record = ReputationRecord(
        found=True, last_activity_days=0, threat_score=5, visitor_type_bits=0
    )

    assert record.is_search_engine() is True
    assert record.visitor_types() == ["search_engine"]
    for flag in VisitorType:
        assert record.has_flag(flag) is False
