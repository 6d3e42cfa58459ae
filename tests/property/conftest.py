# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import flush_outcomes, sizes

    @given(outcome=flush_outcomes)
    def test_flush(outcome) -> None:
        ...
"""

from hypothesis import strategies as st

from sinkmock import OK, PENDING, Err

# =============================================================================
# Outcome strategies
# =============================================================================

# Scripted error payloads - small ints keep shrunk examples readable
error_values = st.integers(min_value=0, max_value=99)

scripted_errors = st.builds(Err, error_values)

# One entry of a flush-outcome script
flush_outcomes = st.one_of(st.just(OK), st.just(PENDING), scripted_errors)

# Short flush scripts; callers pad them so they cannot run dry
flush_scripts = st.lists(flush_outcomes, max_size=6)

# Optional error override for poll_ready/start_send
error_overrides = st.one_of(st.none(), error_values)

# Buffer sizing
sizes = st.integers(min_value=1, max_value=6)
