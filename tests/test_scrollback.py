"""
Tests for the scrollback buffer (kubeterm/scrollback.py).

  1. **TestClassifyLine**: the fixed-priority content classification.
  2. **TestLineSpans**: sub-span styling of "Running" inside SUCCESS lines.
  3. **TestScrollbackBuffer**: append/clear/snapshot, the dirty flag, and the
     optional size cap.
"""

from kubeterm.scrollback import Line, LineKind, ScrollbackBuffer, classify_line, line_spans


class TestClassifyLine:
    """Tests for classify_line()."""

    def test_prompt_line(self):
        assert classify_line("$ kubectl get pods") is LineKind.PROMPT

    def test_running_line_is_success(self):
        assert classify_line("pod-a   1/1   Running   0") is LineKind.SUCCESS

    def test_ready_line_is_status(self):
        assert classify_line("aks-node-1   Ready   agent") is LineKind.STATUS

    def test_everything_else_is_plain(self):
        assert classify_line("NAME   TYPE   AGE") is LineKind.PLAIN
        assert classify_line("") is LineKind.PLAIN

    def test_prompt_beats_running(self):
        """A prompt line that mentions Running is still a prompt line."""
        assert classify_line("$ grep Running") is LineKind.PROMPT

    def test_running_beats_ready(self):
        assert classify_line("Ready   Running") is LineKind.SUCCESS

    def test_markers_are_case_sensitive(self):
        assert classify_line("dashboard ready") is LineKind.PLAIN
        assert classify_line("running") is LineKind.PLAIN

    def test_never_classifies_as_error(self):
        for text in ["Error: boom", "error", "Command not recognized."]:
            assert classify_line(text) is not LineKind.ERROR


class TestLineSpans:
    """Tests for line_spans() — only the Running marker is highlighted."""

    def test_running_span_is_split_out(self):
        line = Line("pod-a   1/1   Running   0", LineKind.SUCCESS)
        assert line_spans(line) == [
            ("pod-a   1/1   ", LineKind.PLAIN),
            ("Running", LineKind.SUCCESS),
            ("   0", LineKind.PLAIN),
        ]

    def test_spans_rejoin_to_original_text(self):
        line = Line("Running a Running b Running", LineKind.SUCCESS)
        spans = line_spans(line)
        assert "".join(text for text, _ in spans) == line.text
        assert [kind for _, kind in spans].count(LineKind.SUCCESS) == 3

    def test_non_success_lines_are_one_span(self):
        line = Line("aks-node-1   Ready   agent", LineKind.STATUS)
        assert line_spans(line) == [(line.text, LineKind.STATUS)]

    def test_error_lines_are_one_span(self):
        """ERROR lines mentioning Running are not split."""
        line = Line("Error: Running failed", LineKind.ERROR)
        assert line_spans(line) == [(line.text, LineKind.ERROR)]


class TestScrollbackBuffer:
    """Tests for ScrollbackBuffer."""

    def test_append_classifies_strings(self):
        buffer = ScrollbackBuffer()
        buffer.append(["$ kubectl get nodes", "aks-node-1   Ready   agent", "plain"])
        assert [line.kind for line in buffer.snapshot()] == [
            LineKind.PROMPT,
            LineKind.STATUS,
            LineKind.PLAIN,
        ]

    def test_append_keeps_explicit_line_kind(self):
        buffer = ScrollbackBuffer()
        buffer.append([Line("something broke", LineKind.ERROR)])
        assert buffer.snapshot() == (Line("something broke", LineKind.ERROR),)

    def test_append_uses_custom_classifier(self):
        buffer = ScrollbackBuffer()
        buffer.append(["a", "b"], classify=lambda _text: LineKind.STATUS)
        assert all(line.kind is LineKind.STATUS for line in buffer.snapshot())

    def test_snapshot_preserves_order_across_appends(self):
        buffer = ScrollbackBuffer()
        buffer.append(["one", "two"])
        buffer.append(["three"])
        assert [line.text for line in buffer.snapshot()] == ["one", "two", "three"]
        assert len(buffer) == 3

    def test_clear_then_append(self):
        """snapshot() only shows lines appended since the last clear."""
        buffer = ScrollbackBuffer()
        buffer.append(["old-1", "old-2"])
        buffer.clear()
        assert buffer.snapshot() == ()
        buffer.append(["new"])
        assert [line.text for line in buffer.snapshot()] == ["new"]

    def test_snapshot_is_read_only_copy(self):
        buffer = ScrollbackBuffer()
        buffer.append(["x"])
        snapshot = buffer.snapshot()
        buffer.append(["y"])
        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_snapshot_has_no_side_effect_on_dirty(self):
        buffer = ScrollbackBuffer()
        buffer.append(["x"])
        buffer.snapshot()
        assert buffer.dirty

    def test_mutations_mark_dirty(self):
        buffer = ScrollbackBuffer()
        assert not buffer.dirty
        buffer.append(["x"])
        assert buffer.consume_dirty()
        assert not buffer.dirty
        buffer.clear()
        assert buffer.consume_dirty()
        assert not buffer.consume_dirty()

    def test_unbounded_by_default(self):
        buffer = ScrollbackBuffer()
        buffer.append([str(i) for i in range(5000)])
        assert len(buffer) == 5000

    def test_zero_cap_means_unbounded(self):
        buffer = ScrollbackBuffer(max_lines=0)
        assert buffer.max_lines is None

    def test_cap_evicts_oldest_lines(self):
        buffer = ScrollbackBuffer(max_lines=3)
        buffer.append(["1", "2"])
        buffer.append(["3", "4", "5"])
        assert [line.text for line in buffer.snapshot()] == ["3", "4", "5"]
