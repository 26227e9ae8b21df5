from agentws.marker import apply, close_marker, open_marker, remove, render, strip


def test_markers():
    assert open_marker("shell") == "# >>> aw shell >>>"
    assert close_marker("shell") == "# <<< aw shell <<<"


def test_appends_when_absent():
    out = render("# rc start\nalias ll='ls -la'\n", "shell", "eval foo")
    assert out.endswith("# >>> aw shell >>>\neval foo\n# <<< aw shell <<<\n")
    assert out.startswith("# rc start\nalias ll")


def test_replaces_in_place():
    pre = "# top\n# >>> aw shell >>>\nold body\n# <<< aw shell <<<\n# tail\n"
    out = render(pre, "shell", "new body")
    assert "new body" in out
    assert "old body" not in out
    assert "# top" in out
    assert "# tail" in out


def test_appends_to_empty_file():
    assert render("", "shell", "x") == "# >>> aw shell >>>\nx\n# <<< aw shell <<<\n"


def test_render_is_idempotent():
    once = render("# top\n", "shell", "x")
    assert render(once, "shell", "x") == once


def test_strip_removes_block_and_keeps_surrounding():
    pre = "# top\n\n# >>> aw foo >>>\nbody\n# <<< aw foo <<<\n# tail\n"
    assert strip(pre, "foo") == ("# top\n\n# tail\n", True)


def test_strip_returns_false_when_block_absent():
    pre = "# unrelated\n"
    assert strip(pre, "foo") == (pre, False)


def test_strip_handles_block_at_end():
    pre = "# top\n# >>> aw foo >>>\nbody\n# <<< aw foo <<<\n"
    assert strip(pre, "foo") == ("# top\n", True)


def test_apply_and_remove_on_disk(tmp_path):
    path = tmp_path / "nested" / "rc"
    apply(path, "foo", "body")
    assert path.read_text() == "# >>> aw foo >>>\nbody\n# <<< aw foo <<<\n"
    assert remove(path, "foo") is True
    assert path.read_text() == ""
    assert remove(path, "foo") is False


def test_remove_missing_file(tmp_path):
    assert remove(tmp_path / "absent", "foo") is False