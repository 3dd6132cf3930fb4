import pytest

from handy.domain.presentation import cn, stop_event_propagation


def test_cn_joins_strings():
    assert cn("a", False, None, "b") == "a b"
    assert cn("foo", False and "bar", None, "baz") == "foo baz"


def test_cn_drops_blank_and_non_strings():
    assert cn("a", "", 3, ["b"], "c") == "a c"
    assert cn() == ""


def test_cn_does_not_call_functions():
    calls = []

    def name():
        calls.append(1)
        return "x"

    assert cn("a", name) == "a"
    assert calls == []


def test_cn_separator():
    assert cn("a", "b", separator="  ") == "a  b"


def test_stop_event_propagation(event):
    assert stop_event_propagation(event) == "stopped"
    assert event.stopped == 1


def test_stop_event_propagation_none():
    assert stop_event_propagation(None) is None


def test_stop_event_propagation_camel_case():
    class BrowserEvent:
        stopped = False

        def stopPropagation(self):
            self.stopped = True

    ev = BrowserEvent()
    stop_event_propagation(ev)
    assert ev.stopped is True


def test_stop_event_propagation_without_method():
    with pytest.raises(AttributeError):
        stop_event_propagation(object())
