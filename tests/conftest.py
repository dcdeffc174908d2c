"""Root conftest — shared test configuration and datasets."""

import os

import pytest

from munro_api.core.dataset import MunroDataset
from munro_api.core.munro import Munro

# Ensure tests never pick up a developer's .env dataset path
os.environ.setdefault("MUNRO_CSV_PATH", "data/munrotab_sample.csv")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def example_dataset() -> MunroDataset:
    """Three-row dataset: one Munro, one Top, one unlisted hill."""
    return MunroDataset.from_records([
        Munro(running_number=1, name="Ben", height_in_metres=1200, category_marker="MUN"),
        Munro(running_number=2, name="Carn", height_in_metres=900, category_marker="TOP"),
        Munro(running_number=3, name="Sgor", height_in_metres=1200, category_marker=""),
    ])


@pytest.fixture
def hills_dataset() -> MunroDataset:
    """Larger dataset with ties on height and name for sort/limit tests."""
    return MunroDataset.from_records([
        Munro(running_number=10, name="Ben Nevis", height_in_metres=1344.53, category_marker="MUN"),
        Munro(running_number=11, name="Carn Dearg", height_in_metres=1221, category_marker="TOP"),
        Munro(running_number=12, name="Carn Mor Dearg", height_in_metres=1220, category_marker="MUN"),
        Munro(running_number=13, name="Ben Macdui", height_in_metres=1309, category_marker="MUN"),
        Munro(running_number=14, name="Aonach Beag", height_in_metres=1234, category_marker="MUN"),
        Munro(running_number=15, name="Stob Coire an Lochain", height_in_metres=1068, category_marker="TOP"),
        Munro(running_number=16, name="Creag an Fhithich", height_in_metres=1047, category_marker=""),
        Munro(running_number=17, name="Ben Chonzie", height_in_metres=931, category_marker="MUN"),
        Munro(running_number=18, name="Beinn a' Chroin", height_in_metres=1221, category_marker="MUN"),
    ])