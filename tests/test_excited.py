from prototool.excited import (
    exclamation,
    exclamation_bidi_stream,
    exclamation_client_stream,
    exclamation_server_stream,
)


def _recording_source(values, received):
    for value in values:
        received.append(value)
        yield value


def test_exclamation():
    assert exclamation("hello") == "hello!"


def test_client_stream():
    assert exclamation_client_stream(["hello", "salutations"]) == "hellosalutations!"


def test_client_stream_empty():
    assert exclamation_client_stream([]) == "!"


def test_server_stream():
    assert list(exclamation_server_stream("hello")) == ["h", "e", "l", "l", "o", "!"]


def test_bidi_stream():
    assert list(exclamation_bidi_stream(["hello", "salutations"])) == [
        "hello!",
        "salutations!",
    ]


def test_bidi_stream_is_lazy():
    received = []
    stream = exclamation_bidi_stream(
        _recording_source(["hello", "salutations"], received)
    )
    assert next(stream) == "hello!"
    assert received == ["hello"]