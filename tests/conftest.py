"""Shared fixtures for compositree tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import Container, Leaf


@pytest.fixture
def file_tree():
    """Root/Documents/Text.txt and Root/Photos/Image.jpg."""
    documents = Container("Documents")
    documents.add(Leaf("Text.txt"))

    photos = Container("Photos")
    photos.add(Leaf("Image.jpg"))

    root = Container("Root")
    root.add(documents)
    root.add(photos)
    return root


@pytest.fixture
def airport():
    """An airport container holding one plane and one bus."""
    airport = Container("Airport", kind="airport")
    airport.add(Leaf("Plane", kind="plane"))
    airport.add(Leaf("Bus", kind="bus"))
    return airport
