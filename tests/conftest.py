"""
Shared test fixtures and utilities for the cmdtree test suite.
"""

import io

import pytest

from cmdtree import Builder, CommanderConfig
from cmdtree.demo import countdown, echo


@pytest.fixture
def config():
    """Configuration with colours off so rendered output is plain text."""
    return CommanderConfig(colorize=False)


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def calls():
    """Records (action name, args) for every call made through `recorder`."""
    return []


@pytest.fixture
def recorder(calls):
    """Factory for handlers that record their arguments and return a marker.

    Usage:
        builder.add_action("go", "", recorder("go"))
    """

    def make(name):
        def handler(args, out):
            calls.append((name, list(args)))
            return f"{name}-done"

        return handler

    return make


@pytest.fixture
def commander(config, sink, recorder):
    """A nested tree:

    example
      clone            (action)
      class1
        inner-class1
          name         (action)
        another
      print
        echo           (action)
        countdown      (action)
    """
    cmder = (
        Builder("example", config)
        .add_action("clone", "clone something", recorder("clone"))
        .begin_class("class1", "class1 help message")
        .begin_class("inner-class1", "nested class!")
        .add_action("name", "print class name", recorder("name"))
        .end_class()
        .begin_class("another", "")
        .end_class()
        .end_class()
        .begin_class("print", "printing actions")
        .add_action("echo", "echo the arguments", echo)
        .add_action("countdown", "count down to zero", countdown)
        .end_class()
        .into_commander()
    )
    return cmder.session(sink=sink)
