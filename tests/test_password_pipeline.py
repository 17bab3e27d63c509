"""Tests for the end-to-end pipeline."""

import random

from conftest import SequenceSource
from core.domain.character_class import CharacterClass
from core.domain.models import PasswordConfig, StrengthLabel
from core.services.password_pipeline import generate_password
from core.services.pool_builder import build_pool


def test_report_fields():
    config = PasswordConfig(
        length=4,
        character_class=CharacterClass.LOWER,
        include_numbers=False,
        include_symbols=False,
    )

    report = generate_password(config, rng=SequenceSource([0, 1, 2, 3]))

    assert report.password == "abcd"
    assert report.pool_size == 26
    assert report.estimate.bits == 8.0
    assert report.estimate.label is StrengthLabel.WEAK


def test_zero_length_report():
    report = generate_password(PasswordConfig(length=0))

    assert report.password == ""
    assert report.estimate.bits == 0.0
    assert report.estimate.ratio == 0.0


def test_sampled_characters_belong_to_the_pool():
    config = PasswordConfig(length=64, exclude_similar=True, extra_characters="é")
    pool = set(build_pool(config))

    for seed in range(10):
        report = generate_password(config, rng=random.Random(seed))
        assert len(report.password) == 64
        assert set(report.password) <= pool


def test_report_serializes_labels_as_strings():
    report = generate_password(PasswordConfig(length=8), rng=random.Random(3))

    assert report.model_dump(mode="json")["estimate"]["label"] in {"weak", "fair", "good", "strong"}
