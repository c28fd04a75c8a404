"""
Tests for helpreg.lib.log_lib — THAC0 verbosity system with named channels.

Covers the THAC0 axis, per-channel overrides, opt-in channels,
channel_active gating, channel spec parsing, hints and tracing.
"""

import io

import pytest

from helpreg.lib.log_lib import (
    Hint,
    OutputManager,
    get_output,
    init_output,
    register_hint,
    trace,
)
from helpreg.lib.log_lib import channels as _channels_mod
from helpreg.lib.log_lib import manager as _manager_mod
from helpreg.lib.log_lib.channels import (
    CHANNEL_DESCRIPTIONS,
    KNOWN_CHANNELS,
    OPT_IN_CHANNELS,
    format_channel_list,
    parse_channel_spec,
)
from helpreg.lib.log_lib.levels import (
    CONFIG, DEBUG, DEFAULT, ERROR, MINIMAL, NOTHING, TIMING, WARNING,
)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)


# =============================================================================
# THAC0 Level Constants
# =============================================================================

class TestLevelConstants:
    """Verify THAC0 level constants."""

    def test_level_ordering(self):
        assert NOTHING < ERROR < WARNING < MINIMAL < DEFAULT < TIMING < CONFIG < DEBUG

    def test_specific_values(self):
        assert DEFAULT == 0
        assert NOTHING == -4
        assert DEBUG == 3


# =============================================================================
# Emit
# =============================================================================

class TestEmit:
    """Basic emit() gating and templating."""

    def test_level_at_threshold_shows(self, out, buf):
        out.emit(0, "shown")
        assert buf.getvalue() == "shown\n"

    def test_level_above_threshold_hidden(self, out, buf):
        out.emit(1, "hidden")
        assert buf.getvalue() == ""

    def test_template_kwargs(self, out, buf):
        out.emit(0, "Documenting {name} at level {level}", name="pkg", level=2)
        assert "Documenting pkg at level 2" in buf.getvalue()

    def test_braces_left_alone_without_kwargs(self, out, buf):
        out.emit(0, "literal {braces}")
        assert "literal {braces}" in buf.getvalue()

    def test_warning_level(self, buf):
        OutputManager(verbosity=-2, file=buf).warning("careful")
        assert "careful" in buf.getvalue()

    def test_warning_hidden_at_errors_only(self, buf):
        OutputManager(verbosity=-3, file=buf).warning("careful")
        assert buf.getvalue() == ""


class TestPerChannelOverrides:
    """Per-channel threshold overrides."""

    def test_channel_override_shows_message(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'registry': 2}, file=buf)
        out.emit(2, "attached", channel='registry')
        assert "attached" in buf.getvalue()

    def test_channel_override_hides_message(self, buf):
        out = OutputManager(verbosity=2, channel_overrides={'registry': 0}, file=buf)
        out.emit(1, "hidden", channel='registry')
        assert buf.getvalue() == ""

    def test_global_threshold_used_when_no_override(self, buf):
        out = OutputManager(verbosity=1, channel_overrides={'registry': 2}, file=buf)
        out.emit(1, "general msg", channel='general')
        assert "general msg" in buf.getvalue()

    def test_hard_wall_on_channel(self, buf):
        out = OutputManager(verbosity=2, channel_overrides={'html': -4}, file=buf)
        out.emit(-3, "even errors", channel='html')
        assert buf.getvalue() == ""


class TestThac0Composition:
    """Verbose/quiet composition."""

    def test_negative_verbosity_shows_errors(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        out.error("visible error")
        assert "visible error" in buf.getvalue()

    def test_hard_wall_blocks_everything(self, buf):
        out = OutputManager(verbosity=-4, file=buf)
        out.error("blocked error")
        assert buf.getvalue() == ""

    def test_quiet_property(self):
        assert OutputManager(verbosity=-1).quiet is True
        assert OutputManager(verbosity=0).quiet is False


# =============================================================================
# Channel Active
# =============================================================================

class TestChannelActive:
    """channel_active() gating."""

    def test_default_channel_active_at_v0(self, out):
        assert out.channel_active('general') is True

    def test_level_argument(self, out):
        assert out.channel_active('general', 1) is False

    def test_opt_in_channel_inactive_by_default(self):
        mgr = init_output(verbosity=0)
        assert mgr.channel_active('trace') is False

    def test_opt_in_channel_active_when_enabled(self):
        mgr = init_output(verbosity=0, channels=['trace:3'])
        assert mgr.channel_active('trace', 3) is True

    def test_channel_active_hard_wall(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'html': -4}, file=buf)
        assert out.channel_active('html') is False


# =============================================================================
# Channel Spec Parsing
# =============================================================================

class TestParseChannelSpec:
    """parse_channel_spec()."""

    def test_name_only(self):
        cfg = parse_channel_spec("registry")
        assert cfg.name == "registry"
        assert cfg.level == 0

    def test_name_and_level(self):
        cfg = parse_channel_spec("registry:2")
        assert cfg.level == 2

    def test_negative_level(self):
        assert parse_channel_spec("error:-3").level == -3

    def test_empty_level_uses_default(self):
        cfg = parse_channel_spec("html::file")
        assert cfg.level == 0
        assert cfg.destination == "file"

    def test_full_spec(self):
        cfg = parse_channel_spec("html:2:file:/tmp/out.log:json")
        assert (cfg.name, cfg.level, cfg.destination, cfg.location, cfg.format) == (
            "html", 2, "file", "/tmp/out.log", "json",
        )

    def test_windows_drive_letter(self):
        cfg = parse_channel_spec("html:2:file:C:\\logs\\out.log")
        assert cfg.location == "C:\\logs\\out.log"

    def test_bad_level(self):
        with pytest.raises(ValueError):
            parse_channel_spec("html:loud")


class TestKnownChannels:
    """Default channel registry."""

    def test_all_channels_have_descriptions(self):
        for ch in KNOWN_CHANNELS:
            assert ch in CHANNEL_DESCRIPTIONS, f"Missing description for '{ch}'"

    def test_opt_in_subset_of_known(self):
        assert OPT_IN_CHANNELS <= KNOWN_CHANNELS

    def test_format_channel_list_marks_opt_in(self):
        listing = format_channel_list()
        for ch in KNOWN_CHANNELS:
            assert ch in listing
        assert "(opt-in)" in listing


class TestInitOutput:
    """init_output() and the singleton."""

    def test_channels_parsed_into_overrides(self):
        mgr = init_output(verbosity=0, channels=['registry:2', 'html:1'])
        assert mgr.channel_overrides == {'trace': -1, 'registry': 2, 'html': 1}

    def test_explicit_overrides_win(self):
        mgr = init_output(verbosity=0, channels=['trace:2'])
        assert mgr.channel_overrides.get('trace') == 2

    def test_get_output_returns_initialized(self):
        mgr = init_output(verbosity=1)
        assert get_output() is mgr

    def test_get_output_creates_default(self):
        _manager_mod._manager = None
        assert get_output().verbosity == 0

    def test_replaced_opt_in_channels_respected(self):
        _channels_mod.OPT_IN_CHANNELS = {'merge'}
        mgr = init_output(verbosity=0)
        assert mgr.channel_overrides == {'merge': -1}


# =============================================================================
# Hints
# =============================================================================

class TestHints:
    """OutputManager.hint() filtering and dedup."""

    @pytest.fixture(autouse=True)
    def _hint(self):
        register_hint(Hint(id='test.tip', message='Tip: {what}',
                           context={'result'}, min_level=0, category='test'))

    def test_hint_shown_in_context(self, out, buf):
        out.hint('test.tip', 'result', what='attach docs')
        assert buf.getvalue() == "Tip: attach docs\n"

    def test_hint_wrong_context(self, out, buf):
        out.hint('test.tip', 'error', what='x')
        assert buf.getvalue() == ""

    def test_hint_shown_once(self, out, buf):
        out.hint('test.tip', 'result', what='x')
        out.hint('test.tip', 'result', what='x')
        assert buf.getvalue().count("Tip:") == 1
        assert 'test.tip' in out.shown_hints

    def test_unknown_hint_ignored(self, out, buf):
        out.hint('does.not.exist')
        assert buf.getvalue() == ""


# =============================================================================
# Trace
# =============================================================================

class TestTrace:
    """@trace decorator."""

    def test_silent_by_default(self, buf):
        _manager_mod._manager = OutputManager(verbosity=0, file=buf)

        @trace
        def double(x):
            return x * 2

        assert double(2) == 4
        assert buf.getvalue() == ""

    def test_entry_and_exit_logged(self, buf):
        _manager_mod._manager = OutputManager(verbosity=0, channel_overrides={'trace': 3}, file=buf)

        @trace
        def double(x):
            return x * 2

        double(21)
        log = buf.getvalue()
        assert ">> " in log and "double(21)" in log
        assert "returned: 42" in log

    def test_exception_logged_and_reraised(self, buf):
        _manager_mod._manager = OutputManager(verbosity=3, file=buf)

        @trace
        def boom():
            raise ValueError("bad")

        with pytest.raises(ValueError):
            boom()
        assert "raised: ValueError: bad" in buf.getvalue()

    def test_long_values_shortened(self, buf):
        _manager_mod._manager = OutputManager(verbosity=3, file=buf)

        @trace
        def ident(x):
            return x

        ident(list(range(10)))
        assert "[...10 items...]" in buf.getvalue()
