"""Tests for demo selection in the entry point."""

import pytest

from main import build_demo
from utils import merge_config


def test_unknown_demo_raises():
    config = merge_config({"run_control": {"demo": "pinball"}})
    with pytest.raises(ValueError):
        build_demo(config)
