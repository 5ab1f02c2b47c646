"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local semdiffstat package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


@pytest.fixture
def sample_go_content() -> bytes:
    """Sample Go source with functions, a method and non-function declarations."""
    return b"""package main

import "fmt"

func Hello(name string) string {
\treturn fmt.Sprintf("Hello, %s!", name)
}

type Greeter struct {
\tPrefix string
}

func (g *Greeter) Greet(name string) string {
\treturn fmt.Sprintf("%s, %s!", g.Prefix, name)
}

const Constant = 42
"""


@pytest.fixture
def sample_python_content() -> bytes:
    """Sample Python source with a function, a class and module-level statements."""
    return b'''import os

LIMIT = 10


def greet(name):
    return f"Hello, {name}!"


class Greeter:
    prefix = "Hi"

    def greet(self, name):
        return f"{self.prefix}, {name}!"

    @staticmethod
    def shout(name):
        return name.upper()
'''
