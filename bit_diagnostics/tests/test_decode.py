"""Tests for the end-to-end decode pipeline."""

from __future__ import annotations

import dataclasses

import numpy as np
import pandas as pd
import pytest

from bit_diagnostics.analysis.decode import decode_lines, decode_report, seed_partitions
from bit_diagnostics.errors import EmptyPartitionError, WidthMismatchError
from bit_diagnostics.ingest.records import parse_records
from bit_diagnostics.models.profile import DecodeProfile
from bit_diagnostics.validation.golden import REFERENCE_RECORDS


# -----------------------------------------------------------------------
# Reference report
# -----------------------------------------------------------------------


def test_reference_report_values() -> None:
    rep = decode_lines(REFERENCE_RECORDS)
    assert rep.as_tuple() == (22, 9, 23, 10)
    assert rep.width == 5
    assert rep.n_records == 12
    assert rep.power_consumption == 198
    assert rep.life_support_rating == 230
    assert rep.warnings == ()


def test_reference_seed_partitions() -> None:
    records = parse_records(REFERENCE_RECORDS)
    o2_seed, co2_seed = seed_partitions(records, 22)
    assert o2_seed.tolist() == [30, 22, 23, 21, 28, 16, 25]
    assert co2_seed.tolist() == [4, 15, 7, 2, 10]


def test_seed_partitions_follow_clear_gamma_top_bit() -> None:
    records = parse_records(["011", "010", "100"])
    o2_seed, co2_seed = seed_partitions(records, 0b011)
    assert o2_seed.tolist() == [3, 2]
    assert co2_seed.tolist() == [4]


def test_reference_without_gamma_seed_matches() -> None:
    rep = decode_lines(REFERENCE_RECORDS, profile=DecodeProfile(seed_from_gamma=False))
    assert rep.as_tuple() == (22, 9, 23, 10)
    # the top-bit split is now a recorded step
    assert rep.o2.steps[0].bit == 4
    assert rep.co2.steps[0].bit == 4


def test_odd_dataset_ties_are_reported() -> None:
    rep = decode_lines(["100", "011", "010"])
    assert (rep.gamma, rep.epsilon) == (0b010, 0)
    assert rep.counts.tie_bits.tolist() == [0, 2]
    assert any("[0, 2]" in w and "clear in both gamma and epsilon" in w for w in rep.warnings)
    assert rep.bit_table()["tie"].tolist() == [True, False, True]
    assert rep.to_metadata_dict()["tie_bits"] == "0,2"


def test_top_bit_tie_depends_on_seeding() -> None:
    lines = ["10", "01", "11", "00"]

    seeded = decode_lines(lines)
    assert (seeded.gamma, seeded.epsilon) == (0, 0)
    assert (seeded.o2_rating, seeded.co2_rating) == (1, 2)
    assert any("clear in both gamma and epsilon" in w for w in seeded.warnings)

    full = decode_lines(lines, profile=DecodeProfile(seed_from_gamma=False))
    assert (full.o2_rating, full.co2_rating) == (3, 0)


# -----------------------------------------------------------------------
# Boundaries
# -----------------------------------------------------------------------


def test_single_record_report() -> None:
    rep = decode_lines(["10110"])
    assert rep.gamma == 0b10110
    assert rep.epsilon == 0
    assert rep.o2_rating == rep.co2_rating == 0b10110


def test_width_one_report() -> None:
    rep = decode_lines(["1", "0", "1"])
    assert (rep.gamma, rep.epsilon) == (1, 0)
    assert (rep.o2_rating, rep.co2_rating) == (1, 0)
    assert any(w.startswith("o2: no bit left") for w in rep.warnings)


# -----------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------


def test_empty_report_raises() -> None:
    with pytest.raises(EmptyPartitionError):
        decode_lines([])
    with pytest.raises(EmptyPartitionError):
        decode_lines(["", "   "])


def test_empty_co2_seed_raises() -> None:
    with pytest.raises(EmptyPartitionError) as excinfo:
        decode_lines(["10", "11", "10"])
    assert excinfo.value.bit == 1


def test_profile_width_must_match_records() -> None:
    records = parse_records(REFERENCE_RECORDS)
    with pytest.raises(WidthMismatchError):
        decode_report(records, profile=DecodeProfile(expected_width=4))


# -----------------------------------------------------------------------
# Report contents
# -----------------------------------------------------------------------


def test_report_is_frozen() -> None:
    rep = decode_lines(REFERENCE_RECORDS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rep.gamma = 0  # type: ignore[misc]


def test_report_fields() -> None:
    names = [f.name for f in dataclasses.fields(decode_lines(REFERENCE_RECORDS))]
    assert names == [
        "width", "n_records", "counts", "gamma", "epsilon",
        "o2", "co2", "profile", "timestamp", "warnings",
    ]


def test_report_metadata_dict() -> None:
    rep = decode_lines(REFERENCE_RECORDS)
    d = rep.to_metadata_dict()
    assert d["gamma"] == 22
    assert d["co2_rating"] == 10
    assert d["life_support_rating"] == 230
    assert d["o2_n_steps"] == 4
    assert d["co2_n_steps"] == 2
    assert d["tie_bits"] == ""
    assert d["profile_seed_from_gamma"] is True
    assert d["decode_timestamp"].endswith("Z")
    assert "warnings" not in d


def test_report_bit_table() -> None:
    rep = decode_lines(REFERENCE_RECORDS)
    df = rep.bit_table()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["bit", "ones", "zeros", "gamma_bit", "epsilon_bit", "tie"]
    assert df["bit"].tolist() == [4, 3, 2, 1, 0]
    assert df["ones"].tolist() == [7, 5, 8, 7, 5]
    assert df["gamma_bit"].tolist() == [1, 0, 1, 1, 0]
    assert df["epsilon_bit"].tolist() == [0, 1, 0, 0, 1]
    assert not df["tie"].any()
    assert np.all(df["ones"] + df["zeros"] == 12)
