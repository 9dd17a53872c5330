# Copyright (c) Microsoft. All rights reserved.

"""Tests for package metadata."""

import urbanairship


def test_version() -> None:
    """Test the version is read from the installed distribution metadata."""
    assert isinstance(urbanairship.__version__, str)
    assert urbanairship.__version__
