"""Tests for the interactive field collector."""

from __future__ import annotations

import pytest

from foliogen.collector import CollectedAnswers, InteractiveCollector


def _defaults(**overrides: str) -> CollectedAnswers:
    values = dict(
        title="My App",
        tagline="Does things",
        description="A thing that does things.",
        demo_url="",
        social_url="",
        image_url="https://images.example.com/a.png",
    )
    values.update(overrides)
    return CollectedAnswers(**values)


def _scripted(answers):  # type: ignore[no-untyped-def]
    prompts: list = []
    remaining = list(answers)

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return remaining.pop(0)

    return ask, prompts


def test_empty_answers_keep_defaults() -> None:
    ask, prompts = _scripted([""] * 6)
    answers = InteractiveCollector(input_func=ask).collect(_defaults())

    assert answers == _defaults()
    assert prompts[0] == "Project title [My App]: "
    assert prompts[3] == "YouTube demo URL (optional): "
    assert len(prompts) == 6


def test_answers_override_defaults() -> None:
    ask, _ = _scripted(
        ["Better Name", "", "  New description  ", "https://youtu.be/x", "", "https://img/b.png"]
    )
    answers = InteractiveCollector(input_func=ask).collect(_defaults())

    assert answers.title == "Better Name"
    assert answers.tagline == "Does things"
    assert answers.description == "New description"
    assert answers.demo_url == "https://youtu.be/x"
    assert answers.social_url == ""
    assert answers.image_url == "https://img/b.png"


def test_title_is_asked_until_provided(capsys: pytest.CaptureFixture[str]) -> None:
    ask, prompts = _scripted(["", "   ", "Named", "", "", "", "", ""])
    answers = InteractiveCollector(input_func=ask).collect(_defaults(title=""))

    assert answers.title == "Named"
    assert prompts[:3] == ["Project title: "] * 3
    assert capsys.readouterr().err.count("Title is required") == 2


def test_long_defaults_are_previewed() -> None:
    ask, prompts = _scripted([""] * 6)
    InteractiveCollector(input_func=ask).collect(_defaults(description="word " * 40))

    preview = prompts[2]
    assert preview.startswith("Full description [word word")
    assert preview.endswith("...]: ")


def test_non_interactive_returns_defaults() -> None:
    def fail(prompt: str) -> str:
        raise AssertionError("should not prompt")

    collector = InteractiveCollector(interactive=False, input_func=fail)
    defaults = _defaults()

    answers = collector.collect(defaults)

    assert answers == defaults
    assert answers is not defaults


def test_non_interactive_requires_title() -> None:
    with pytest.raises(ValueError, match="Title is required"):
        InteractiveCollector(interactive=False).collect(_defaults(title="  "))


class _Stdin:
    def __init__(self, tty: bool) -> None:
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


def test_interactivity_follows_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", _Stdin(False))
    assert InteractiveCollector().interactive is False

    monkeypatch.setattr("sys.stdin", _Stdin(True))
    assert InteractiveCollector().interactive is True
