"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.pipeline_runner import PipelineRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [PipelineRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - pipeline: Uses the minic lexer, parser, visitor and serializer
    """
    return request.param
